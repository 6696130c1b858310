#!/usr/bin/env python3
"""
Mirror a directory tree while renaming extensions, then tidy up.

This example demonstrates:
- copy() with a custom FileCreator policy
- A size report using walk() with a post-visit hook
- prune_empty_dirs() on the mirror
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeops import (
    ExtensionMappingCreator,
    FileNavigator,
    PreorderWalker,
    CallbackProcessor,
    copy,
    prune_empty_dirs,
    walk,
)


def subtree_sizes(root: Path) -> dict:
    """Total bytes under every directory, computed bottom-up."""
    sizes = {}
    navigator = FileNavigator()

    def post_visit(node, path):
        own = 0 if node.is_directory() else node.path.stat().st_size
        sizes[node.path] = sizes.get(node.path, 0) + own
        if path.parent is not None:
            parent = path.parent.element.path
            sizes[parent] = sizes.get(parent, 0) + sizes[node.path]

    walk(PreorderWalker(navigator.create_node(root), navigator),
         CallbackProcessor(post_visit=post_visit))
    return sizes


def main():
    if len(sys.argv) != 3:
        print("usage: mirror_with_rename.py SOURCE TARGET")
        return 2

    source, target = Path(sys.argv[1]), Path(sys.argv[2])
    copy(source, target, ExtensionMappingCreator({".markdown": ".md", ".htm": ".html"}))
    removed = prune_empty_dirs(target)

    print(f"Mirrored {source} -> {target}, pruned {len(removed)} empty directories")
    for directory, size in sorted(subtree_sizes(target).items()):
        if directory.is_dir():
            print(f"  {size:>12,}  {directory.relative_to(target)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
