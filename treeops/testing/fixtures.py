"""Test fixtures for treeops consumers.

In-memory trees and a recording processor, so traversal behavior can be
checked without touching the filesystem.

Example:
    root = DictNode.build("r", {"a": None, "b": {"c": None}})
    recorder = RecordingProcessor()
    walk(PreorderWalker(root, DictNavigator()), recorder)
    assert recorder.events[:2] == [("pre", "r"), ("pre", "a")]
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.navigator import Navigator
from ..core.node import TreeNode
from ..core.path import TreePath
from ..core.processor import Processor


class DictNode(TreeNode):
    """Node of a tree described by nested dicts.

    A mapping value is an inner node whose items are its children, in
    insertion order. Any other value is a leaf payload.
    """

    def __init__(self, key: str, value: Any = None, parent_id: Optional[str] = None):
        self.key = key
        self.value = value
        self._id = key if parent_id is None else f"{parent_id}/{key}"

    @classmethod
    def build(cls, name: str, tree: Dict[str, Any]) -> 'DictNode':
        return cls(name, tree)

    def identifier(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self.key

    def is_leaf(self) -> bool:
        return not isinstance(self.value, Mapping)

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.key,
            'is_leaf': self.is_leaf(),
            'children': 0 if self.is_leaf() else len(self.value),
        }


class DictNavigator(Navigator):
    """Navigator over DictNode trees.

    Children are read from the node's mapping at call time, so tests can
    mutate the dicts between steps.
    """

    def __init__(self):
        self.calls: List[str] = []

    def children(self, node: DictNode) -> List[DictNode]:
        self.calls.append(node.identifier())
        if node.is_leaf():
            return []
        return [DictNode(key, value, node.identifier()) for key, value in node.value.items()]


class RecordingProcessor(Processor):
    """Processor that records ``("pre"|"post", name)`` events.

    Args:
        skip: Names whose subtree ``pre_visit`` declines to enter
        fail_on: ``(kind, name)`` pairs that raise RuntimeError when reached
    """

    def __init__(self,
                 skip: Iterable[str] = (),
                 fail_on: Iterable[Tuple[str, str]] = ()):
        self.skip = set(skip)
        self.fail_on = set(fail_on)
        self.events: List[Tuple[str, str]] = []
        self.paths: Dict[str, TreePath] = {}

    def pre_visit(self, node: Any, path: TreePath) -> bool:
        self._record("pre", node)
        self.paths[node.name] = path
        return node.name not in self.skip

    def post_visit(self, node: Any, path: TreePath) -> None:
        self._record("post", node)

    def names(self, kind: str) -> List[str]:
        return [name for event, name in self.events if event == kind]

    def _record(self, kind: str, node: Any) -> None:
        if (kind, node.name) in self.fail_on:
            raise RuntimeError(f"{kind}_visit failed on {node.name}")
        self.events.append((kind, node.name))
