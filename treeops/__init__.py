"""treeops - recursive filesystem operations on a generic tree walker.

The traversal engine separates how children are found (Navigator) from what
happens at each node (Processor):

    from treeops.core import PreorderWalker, walk

File operations are built on it:

    from treeops import delete, copy, copy_into, mkdirs, prune_empty_dirs

Platform separators, well-known directories and ``to_url`` live in the
``treeops.paths`` submodule.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeOpsError,
    ConfigError,
    TraversalError,
    ExhaustedTraversalError,
    FileOperationError,
    DeleteFailedError,
    CreateDirFailedError,
    CopyFailedError,
)
from .config import OperationsConfig
from .core import (
    TreeNode,
    Navigator,
    FilteredNavigator,
    CallableNavigator,
    TreePath,
    Walker,
    PreorderWalker,
    Processor,
    CallbackProcessor,
    walk,
    walk_tree,
)
from .adapters import FileSystemNode, FileNavigator
from .fileops import (
    delete,
    prune_empty_dirs,
    delete_empty_dirs,
    mkdir,
    mkdirs,
    copy,
    copy_into,
    FileCreator,
    DefaultFileCreator,
    ExtensionMappingCreator,
)
from .streams import pump
from . import paths

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeOpsError",
    "ConfigError",
    "TraversalError",
    "ExhaustedTraversalError",
    "FileOperationError",
    "DeleteFailedError",
    "CreateDirFailedError",
    "CopyFailedError",
    # Config
    "OperationsConfig",
    # Core
    "TreeNode",
    "Navigator",
    "FilteredNavigator",
    "CallableNavigator",
    "TreePath",
    "Walker",
    "PreorderWalker",
    "Processor",
    "CallbackProcessor",
    "walk",
    "walk_tree",
    # Adapters
    "FileSystemNode",
    "FileNavigator",
    # Operations
    "delete",
    "prune_empty_dirs",
    "delete_empty_dirs",
    "mkdir",
    "mkdirs",
    "copy",
    "copy_into",
    "FileCreator",
    "DefaultFileCreator",
    "ExtensionMappingCreator",
    "pump",
    "paths",
]
