"""Ancestor paths produced by walkers.

A TreePath records the chain of nodes from the traversal root down to the
node currently being visited. Paths are immutable: each one links to its
parent path, so handing a path to a processor never exposes walker state.
"""

from typing import Any, Iterator, List, Optional


class TreePath:
    """Immutable chain of nodes from a traversal root to one node.

    The root is exclusive in the sequence: iterating a path yields the nodes
    below the root, ending with ``element``. Therefore ``len(path)`` equals
    ``path.depth`` and the root path is empty with depth 0.

    Attributes:
        element: The node this path leads to
        parent: Path of the parent node, or None for the root
        index: Position of ``element`` among its siblings (0 for the root)
        depth: Number of edges between the root and ``element``
    """

    __slots__ = ("element", "parent", "index", "depth")

    def __init__(self, element: Any, parent: Optional['TreePath'] = None, index: int = 0):
        self.element = element
        self.parent = parent
        self.index = index
        self.depth = 0 if parent is None else parent.depth + 1

    def child(self, element: Any, index: int = 0) -> 'TreePath':
        """Return the path of ``element`` as a child of this path's node."""
        return TreePath(element, self, index)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root(self) -> Any:
        """The traversal root this path starts from."""
        path = self
        while path.parent is not None:
            path = path.parent
        return path.element

    def ancestor(self, depth: int) -> 'TreePath':
        """Return the path of the ancestor at ``depth`` (0 = root).

        Raises:
            ValueError: If depth is negative or deeper than this path
        """
        if depth < 0 or depth > self.depth:
            raise ValueError(f"Invalid depth {depth} for path of depth {self.depth}")
        path = self
        while path.depth > depth:
            path = path.parent
        return path

    def is_ancestor_of(self, other: 'TreePath') -> bool:
        """Return True if this path is a proper prefix of ``other``."""
        if other.depth <= self.depth:
            return False
        theirs = other.ancestor(self.depth)
        mine = self
        while mine is not None:
            if theirs is mine:
                return True
            if theirs.element != mine.element:
                return False
            theirs, mine = theirs.parent, mine.parent
        return True

    def nodes(self) -> List[Any]:
        """Return the nodes below the root, outermost first."""
        nodes = []
        path = self
        while path.parent is not None:
            nodes.append(path.element)
            path = path.parent
        nodes.reverse()
        return nodes

    def __iter__(self) -> Iterator[Any]:
        return iter(self.nodes())

    def __len__(self) -> int:
        return self.depth

    def __bool__(self) -> bool:
        # the root path is empty but still a path
        return True

    def __repr__(self) -> str:
        chain = [self.root] + self.nodes()
        return "TreePath(" + " > ".join(str(node) for node in chain) + ")"
