"""Processor contract for treeops traversals.

A Processor is the processing policy of a traversal: a pair of hooks the
driver calls around each node. ``pre_visit`` runs top-down, before any
descendant is visited; ``post_visit`` runs bottom-up, once every descendant
has been fully processed.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .path import TreePath


class Processor(ABC):
    """Callback pair invoked by ``walk`` as a walker advances.

    Hooks may raise to abort the traversal; the exception propagates to the
    caller of ``walk`` unchanged. A processor instance may hold state for
    the duration of one traversal.
    """

    @abstractmethod
    def pre_visit(self, node: Any, path: TreePath) -> bool:
        """Called before the node's descendants are visited.

        Returns:
            True to descend into the node, False to skip its subtree
        """
        pass

    @abstractmethod
    def post_visit(self, node: Any, path: TreePath) -> None:
        """Called after all of the node's descendants have been processed."""
        pass


class CallbackProcessor(Processor):
    """Processor built from plain functions.

    Either hook may be omitted. A missing or None-returning ``pre_visit``
    means "descend".
    """

    def __init__(self,
                 pre_visit: Optional[Callable[[Any, TreePath], Optional[bool]]] = None,
                 post_visit: Optional[Callable[[Any, TreePath], None]] = None):
        self._pre_visit = pre_visit
        self._post_visit = post_visit

    def pre_visit(self, node: Any, path: TreePath) -> bool:
        if self._pre_visit is None:
            return True
        result = self._pre_visit(node, path)
        return True if result is None else bool(result)

    def post_visit(self, node: Any, path: TreePath) -> None:
        if self._post_visit is not None:
            self._post_visit(node, path)
