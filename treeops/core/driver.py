"""Traversal driver pairing walkers with processors.

``walk`` pumps a walker to completion and calls the processor's hooks in
classic DFS order:

    pre(A) -> pre(B) -> post(B) -> post(A)   for ancestor A of B

Post-visits are derived from depth alone: when the walker emits a node at
depth d, every open node at depth >= d has no more descendants to come and
is post-visited, innermost first.
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from .navigator import Navigator
from .path import TreePath
from .processor import CallbackProcessor, Processor
from .walker import PreorderWalker, Walker

logger = logging.getLogger(__name__)


def walk(walker: Walker, processor: Processor) -> int:
    """Drive ``walker`` to completion, invoking ``processor`` around each node.

    A False return from ``pre_visit`` skips the node's subtree; the node is
    still post-visited. Any exception raised by a hook or by the navigator
    aborts the walk and propagates unchanged.

    Args:
        walker: Walker to consume; may already have been advanced
        processor: Hooks to call

    Returns:
        Number of nodes visited
    """
    open_nodes: List[Tuple[Any, TreePath]] = []
    visited = 0

    logger.debug("walk started: %r with %s", walker, processor.__class__.__name__)

    while True:
        item = walker.step()
        if item is None:
            break
        node, path = item

        while open_nodes and open_nodes[-1][1].depth >= path.depth:
            done_node, done_path = open_nodes.pop()
            processor.post_visit(done_node, done_path)

        visited += 1
        if not processor.pre_visit(node, path):
            walker.skip()
        open_nodes.append((node, path))

    while open_nodes:
        done_node, done_path = open_nodes.pop()
        processor.post_visit(done_node, done_path)

    logger.debug("walk finished: %d nodes visited", visited)
    return visited


def walk_tree(root: Any,
              navigator: Navigator,
              pre_visit: Optional[Callable[[Any, TreePath], Optional[bool]]] = None,
              post_visit: Optional[Callable[[Any, TreePath], None]] = None) -> int:
    """Walk the tree under ``root`` pre-order with plain callback functions.

    Example:
        >>> walk_tree(root, navigator, post_visit=lambda node, path: print(node))
    """
    return walk(PreorderWalker(root, navigator), CallbackProcessor(pre_visit, post_visit))
