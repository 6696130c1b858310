"""Navigator abstraction for treeops.

The Navigator is the navigation policy of a traversal: given a node it
produces the node's ordered children. Walkers know nothing else about the
tree, which is what lets one traversal engine walk filesystems, in-memory
test trees, or anything else with a parent/child relation.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator


class Navigator(ABC):
    """Produces the ordered children of a node.

    Navigators are stateless policies. ``children`` must reflect the node's
    state at call time and must return a finite iterable; returning an
    empty iterable marks the node as a leaf.
    """

    @abstractmethod
    def children(self, node: Any) -> Iterable[Any]:
        """Return the children of ``node`` in traversal order.

        Args:
            node: The parent node

        Returns:
            Finite iterable of child nodes
        """
        pass

    def filtered(self, accept: Callable[[Any], bool]) -> 'FilteredNavigator':
        """Return a navigator yielding only the children ``accept`` keeps."""
        return FilteredNavigator(self, accept)


class FilteredNavigator(Navigator):
    """Navigator that narrows another navigator's children with a predicate.

    Rejected children are neither emitted nor descended into, which makes
    this the way to prune subtrees from a traversal. Relative order of the
    accepted children is preserved.

    Attributes:
        base_navigator: The wrapped navigator providing children
        accept: Predicate returning True to keep a child
    """

    def __init__(self, base_navigator: Navigator, accept: Callable[[Any], bool]):
        self.base_navigator = base_navigator
        self.accept = accept

    def children(self, node: Any) -> Iterator[Any]:
        for child in self.base_navigator.children(node):
            if self.accept(child):
                yield child

    def __repr__(self) -> str:
        return f"FilteredNavigator({self.base_navigator!r})"


class CallableNavigator(Navigator):
    """Adapts a plain ``children(node)`` function to the Navigator contract."""

    def __init__(self, func: Callable[[Any], Iterable[Any]]):
        self.func = func

    def children(self, node: Any) -> Iterable[Any]:
        return self.func(node)
