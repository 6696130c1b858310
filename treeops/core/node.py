"""TreeNode abstraction for treeops.

A node is a handle to one element of a tree. Navigation (how to get the
children of a node) lives in the Navigator, so the same node type can be
walked in different ways. The traversal engine never requires TreeNode;
any object works as a node as long as the navigator understands it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class TreeNode(ABC):
    """Abstract base class for nodes with a stable identity.

    Nodes are compared and hashed by ``identifier()``. Implementations must
    read their state on demand rather than caching it, because file
    operations mutate the tree while it is being walked.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique, stable identifier for this node.

        Examples:
        - Filesystem: absolute path ("/home/user/file.txt")
        - In-memory tree: slash-joined key path ("r/b/c")
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Return True if a navigator should never descend into this node."""
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node, read fresh."""
        pass

    @property
    def name(self) -> str:
        """Last component of the identifier."""
        return self.identifier().rstrip("/").rsplit("/", 1)[-1]

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
