"""Core abstractions for treeops.

This package contains the traversal engine: navigators, paths, walkers,
processors and the driver that ties them together. None of it knows about
filesystems.
"""

from .node import TreeNode
from .navigator import Navigator, FilteredNavigator, CallableNavigator
from .path import TreePath
from .walker import Walker, PreorderWalker
from .processor import Processor, CallbackProcessor
from .driver import walk, walk_tree

__all__ = [
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
]
