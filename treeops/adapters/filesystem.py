"""Filesystem adapter for treeops.

FileSystemNode wraps a path; FileNavigator lists directory entries as child
nodes. Together they let the generic walker traverse real directory trees.
"""

import os
import stat
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from ..config import OperationsConfig
from ..core.navigator import FilteredNavigator, Navigator
from ..core.node import TreeNode


class FileSystemNode(TreeNode):
    """Concrete node implementation for filesystem entries.

    Represents a file, directory or symbolic link. Nothing is cached: every
    query hits the filesystem, because file operations change the tree
    while walking it.
    """

    def __init__(self, path: Union[str, Path], follow_symlinks: bool = False):
        """Initialize a filesystem node.

        Args:
            path: Path to the file or directory
            follow_symlinks: Treat a link to a directory as a directory
        """
        self.path = Path(path)
        self.follow_symlinks = follow_symlinks

    def identifier(self) -> str:
        """Return absolute path as unique identifier."""
        return str(self.path.absolute())

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    def exists(self) -> bool:
        """True if the entry exists; a dangling symlink counts as existing."""
        return os.path.lexists(self.path)

    def is_symlink(self) -> bool:
        return self.path.is_symlink()

    def is_directory(self) -> bool:
        """True for directories, and for links to them when following links."""
        if not self.follow_symlinks and self.path.is_symlink():
            return False
        return self.path.is_dir()

    def is_leaf(self) -> bool:
        return not self.is_directory()

    def child(self, name: str) -> 'FileSystemNode':
        return FileSystemNode(self.path / name, follow_symlinks=self.follow_symlinks)

    def metadata(self) -> Dict[str, Any]:
        """Return filesystem metadata for this node."""
        metadata: Dict[str, Any] = {
            'name': self.name,
            'path': str(self.path),
            'exists': self.exists(),
        }
        if not metadata['exists']:
            return metadata

        # dangling links are described by the link itself
        follow = self.follow_symlinks and self.path.exists()
        st = os.stat(self.path, follow_symlinks=follow)
        mode = st.st_mode
        metadata.update({
            'size': st.st_size,
            'mtime': st.st_mtime,
            'mode': mode,
            'is_file': stat.S_ISREG(mode),
            'is_dir': stat.S_ISDIR(mode),
            'is_link': self.path.is_symlink(),
        })
        if metadata['is_file']:
            metadata['extension'] = self.path.suffix
        return metadata

    def __repr__(self) -> str:
        return f"FileSystemNode(path={self.path!r})"


class FileNavigator(Navigator):
    """Navigator listing directory entries as FileSystemNode children.

    Non-directories have no children. Entries are listed eagerly at call
    time, so removing them while the walk is still inside the directory is
    safe. Listing errors propagate to the caller.
    """

    def __init__(self,
                 follow_symlinks: bool = False,
                 include_hidden: bool = True,
                 sort_children: bool = True):
        """Initialize filesystem navigator.

        Args:
            follow_symlinks: Descend into symlinked directories
            include_hidden: Include entries whose name starts with a dot
            sort_children: Emit entries in name order
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden
        self.sort_children = sort_children

    @classmethod
    def from_config(cls, config: OperationsConfig) -> 'FileNavigator':
        return cls(
            follow_symlinks=config.follow_symlinks,
            include_hidden=config.include_hidden,
            sort_children=config.sort_children,
        )

    def children(self, node: FileSystemNode) -> List[FileSystemNode]:
        """Get child nodes (files, links and subdirectories)."""
        if not node.is_directory():
            return []

        names = os.listdir(node.path)
        if self.sort_children:
            names.sort()

        return [
            FileSystemNode(node.path / name, follow_symlinks=self.follow_symlinks)
            for name in names
            if self.include_hidden or not name.startswith('.')
        ]

    def create_node(self, path: Union[str, Path]) -> FileSystemNode:
        """Create a root node consistent with this navigator's settings."""
        return FileSystemNode(path, follow_symlinks=self.follow_symlinks)

    def directories_only(self) -> FilteredNavigator:
        """Return a navigator restricted to directory children."""
        return self.filtered(FileSystemNode.is_directory)

    def __repr__(self) -> str:
        return (f"FileNavigator(follow_symlinks={self.follow_symlinks}, "
                f"include_hidden={self.include_hidden})")


def exclude_names(names: set) -> Callable[[FileSystemNode], bool]:
    """Build an ``accept`` predicate rejecting entries with the given names.

    Example:
        >>> navigator = FileNavigator().filtered(exclude_names({'.git', '__pycache__'}))
    """
    def accept(node: FileSystemNode) -> bool:
        return node.name not in names
    return accept
