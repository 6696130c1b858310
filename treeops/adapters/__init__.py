"""Tree adapters for specific tree structures.

Adapters supply nodes and navigators for concrete tree types so the generic
walker can traverse them.
"""

from .filesystem import FileSystemNode, FileNavigator, exclude_names

__all__ = [
    "FileSystemNode",
    "FileNavigator",
    "exclude_names",
]
