"""Exception hierarchy for treeops.

Every failure raised by the traversal engine or the file operations derives
from TreeOpsError, so callers can catch the whole family in one place.
Filesystem failures carry the offending path and chain the underlying
OSError as ``__cause__``.
"""

from pathlib import Path
from typing import Optional, Union


class TreeOpsError(Exception):
    """Base class for all treeops errors."""
    pass


class ConfigError(TreeOpsError):
    """Raised when an OperationsConfig fails validation."""
    pass


class TraversalError(TreeOpsError):
    """Raised when a walker is driven incorrectly."""
    pass


class ExhaustedTraversalError(TraversalError):
    """Raised when a walker is advanced after it reported completion."""
    pass


class FileOperationError(TreeOpsError):
    """A filesystem operation failed on a specific path."""

    verb = "process"

    def __init__(self, path: Union[str, Path], message: Optional[str] = None):
        self.path = Path(path)
        if message is None:
            message = f"couldn't {self.verb}: {self.path}"
        super().__init__(message)


class DeleteFailedError(FileOperationError):
    """Removing a file or directory failed."""

    verb = "delete"


class CreateDirFailedError(FileOperationError):
    """Creating a directory failed and it still does not exist."""

    verb = "create directory"


class CopyFailedError(FileOperationError):
    """Copying ``source`` to ``path`` failed."""

    verb = "copy"

    def __init__(self,
                 source: Union[str, Path],
                 target: Union[str, Path],
                 message: Optional[str] = None):
        self.source = Path(source)
        if message is None:
            message = f"couldn't copy {self.source} to {target}"
        super().__init__(target, message)
