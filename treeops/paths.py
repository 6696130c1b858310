"""Platform path constants and URL conversion."""

import os
import sys
import tempfile
from pathlib import Path
from typing import Union

PATH_SEPARATOR = os.pathsep
SEPARATOR = os.sep
LINE_SEPARATOR = os.linesep

PYTHON_HOME = Path(sys.prefix)
USER_HOME = Path.home()
USER_DIR = Path.cwd()
TMP_DIR = Path(tempfile.gettempdir())


def to_url(path: Union[str, Path]) -> str:
    """Return the absolute ``file://`` URL of ``path``.

    Example:
        >>> to_url("/tmp/a b.txt")
        'file:///tmp/a%20b.txt'
    """
    return Path(path).absolute().as_uri()
