"""Command line interface for treeops.

Usage:
    treeops delete PATH...          # Delete files or directory trees
    treeops mkdir [-p] DIR...       # Create directories
    treeops copy SRC DST            # Copy SRC to DST
    treeops copy-into SRC DIR       # Copy SRC into DIR, keeping its name
    treeops prune DIR...            # Remove empty directories under DIR
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import fileops
from .config import OperationsConfig
from .errors import TreeOpsError


def _cmd_delete(args, config):
    for path in args.paths:
        fileops.delete(path, config)


def _cmd_mkdir(args, config):
    make = fileops.mkdirs if args.parents else fileops.mkdir
    for directory in args.dirs:
        make(directory)


def _cmd_copy(args, config):
    fileops.copy(args.source, args.target, config=config)


def _cmd_copy_into(args, config):
    target = fileops.copy_into(args.source, args.target_dir, config=config)
    print(target)


def _cmd_prune(args, config):
    for directory in args.dirs:
        for removed in fileops.prune_empty_dirs(directory, config):
            print(removed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeops",
        description="Recursive filesystem tree operations",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every entry touched")
    parser.add_argument("--follow-symlinks", action="store_true", default=None,
                        help="Descend into symlinked directories (copy and prune; delete never does)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    delete = subparsers.add_parser("delete", help="Delete files or directory trees")
    delete.add_argument("paths", nargs="+")
    delete.set_defaults(func=_cmd_delete)

    mkdir = subparsers.add_parser("mkdir", help="Create directories")
    mkdir.add_argument("-p", "--parents", action="store_true",
                       help="Create missing parent directories")
    mkdir.add_argument("dirs", nargs="+")
    mkdir.set_defaults(func=_cmd_mkdir)

    copy = subparsers.add_parser("copy", help="Copy a file or directory tree")
    copy.add_argument("source")
    copy.add_argument("target")
    copy.set_defaults(func=_cmd_copy)

    copy_into = subparsers.add_parser("copy-into", help="Copy into a directory")
    copy_into.add_argument("source")
    copy_into.add_argument("target_dir")
    copy_into.set_defaults(func=_cmd_copy_into)

    prune = subparsers.add_parser("prune", help="Remove empty directories")
    prune.add_argument("dirs", nargs="+")
    prune.set_defaults(func=_cmd_prune)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = OperationsConfig.from_env()
        if args.follow_symlinks is not None:
            config.follow_symlinks = args.follow_symlinks
        args.func(args, config)
    except TreeOpsError as exc:
        print(f"treeops: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
