"""Walkers: lazy, stateful cursors over a tree.

A walker is driven one step at a time. Each step emits the next node
together with its TreePath. Walkers work with any Navigator, so they are
independent of the tree structure being walked.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Tuple

from ..errors import ExhaustedTraversalError, TraversalError
from .navigator import Navigator
from .path import TreePath


Step = Tuple[Any, TreePath]


class Walker(ABC):
    """Abstract base class for single-pass tree cursors.

    ``step()`` returns the next ``(node, path)`` pair, or None once the walk
    is complete. A walker cannot be rewound; construct a new one to walk the
    tree again. Walkers are also iterators, so ``for node, path in walker``
    consumes the remaining steps.
    """

    def __init__(self, root: Any, navigator: Navigator):
        """Initialize walker with a root node and a navigator.

        Args:
            root: Node the walk starts from
            navigator: Navigator producing children
        """
        self.root = root
        self.navigator = navigator

    @abstractmethod
    def step(self) -> Optional[Step]:
        """Advance to the next node.

        Returns:
            ``(node, path)`` for the next node, or None when the walk is done

        Raises:
            ExhaustedTraversalError: If called again after returning None
        """
        pass

    @abstractmethod
    def skip(self) -> None:
        """Do not descend into the node emitted by the last step."""
        pass

    @property
    @abstractmethod
    def current_path(self) -> Optional[TreePath]:
        """Path of the node emitted by the last step, None before the first."""
        pass

    @property
    @abstractmethod
    def finished(self) -> bool:
        """True once step() has returned the end marker."""
        pass

    def __iter__(self) -> Iterator[Step]:
        return self

    def __next__(self) -> Step:
        if self.finished:
            raise StopIteration
        item = self.step()
        if item is None:
            raise StopIteration
        return item


class _Frame:
    """One level of the walker stack: a node whose children are being emitted."""

    __slots__ = ("path", "children", "next_index")

    def __init__(self, path: TreePath, children: Iterator[Any]):
        self.path = path
        self.children = children
        self.next_index = 0


_DONE = object()


class PreorderWalker(Walker):
    """Depth-first, pre-order walker.

    A parent is always emitted before any of its descendants and children
    are emitted in navigator order. The walker keeps an explicit stack of
    frames instead of recursing, so depth is bounded by memory rather than
    the interpreter's recursion limit.

    Children of a node are requested from the navigator only when the walker
    descends into it, which happens on the step *after* the node was emitted.
    That is what makes ``skip()`` safe: skipping simply means the descent
    never happens.
    """

    def __init__(self, root: Any, navigator: Navigator):
        super().__init__(root, navigator)
        self._stack: List[_Frame] = []
        self._pending: Optional[TreePath] = None
        self._current: Optional[TreePath] = None
        self._started = False
        self._finished = False

    @property
    def current_path(self) -> Optional[TreePath]:
        return self._current

    @property
    def finished(self) -> bool:
        return self._finished

    def step(self) -> Optional[Step]:
        if self._finished:
            raise ExhaustedTraversalError(
                f"{self.__class__.__name__} rooted at {self.root!r} is exhausted"
            )

        if not self._started:
            self._started = True
            return self._emit(TreePath(self.root))

        if self._pending is not None:
            pending, self._pending = self._pending, None
            children = iter(self.navigator.children(pending.element))
            self._stack.append(_Frame(pending, children))

        while self._stack:
            frame = self._stack[-1]
            child = next(frame.children, _DONE)
            if child is _DONE:
                self._stack.pop()
                continue
            index = frame.next_index
            frame.next_index += 1
            return self._emit(frame.path.child(child, index))

        self._finished = True
        self._current = None
        return None

    def skip(self) -> None:
        if not self._started or self._finished:
            raise TraversalError("skip() requires a node emitted by step()")
        self._pending = None

    def _emit(self, path: TreePath) -> Step:
        self._current = path
        self._pending = path
        return path.element, path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r}, depth={len(self._stack)})"
