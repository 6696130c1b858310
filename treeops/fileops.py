"""Recursive filesystem operations built on the treeops walker.

Each operation is a Processor specialization plus a thin argument check:

- ``delete`` removes nodes in post-visit, so children go before parents.
- ``prune_empty_dirs`` walks directories only and removes the empty ones in
  post-visit, so a directory emptied by pruning is caught in the same pass.
- ``copy`` materializes targets in pre-visit while a shadow stack of target
  directories mirrors the traversal depth.
- ``mkdir`` / ``mkdirs`` create directories idempotently.

Operations are not transactional. The first failure aborts the walk and is
raised with the offending path; whatever was done before it stays done.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Union

from .adapters.filesystem import FileNavigator, FileSystemNode
from .config import OperationsConfig, resolve_config
from .core.driver import walk
from .core.path import TreePath
from .core.processor import Processor
from .core.walker import PreorderWalker
from .errors import CopyFailedError, CreateDirFailedError, DeleteFailedError
from .streams import pump

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# --------------------------------------------------------------------- delete

def _remove(node: FileSystemNode) -> None:
    """Remove a single entry; links are unlinked, never followed."""
    try:
        if not node.is_symlink() and node.path.is_dir():
            os.rmdir(node.path)
        else:
            os.unlink(node.path)
    except OSError as exc:
        logger.error("couldn't delete %s: %s", node.path, exc)
        raise DeleteFailedError(node.path) from exc
    logger.debug("deleted %s", node.path)


class _DeleteProcessor(Processor):
    """Removes every visited node once its subtree is gone."""

    def __init__(self):
        self.removed = 0

    def pre_visit(self, node: FileSystemNode, path: TreePath) -> bool:
        return True

    def post_visit(self, node: FileSystemNode, path: TreePath) -> None:
        _remove(node)
        self.removed += 1


def delete(path: PathLike, config: Optional[OperationsConfig] = None) -> None:
    """Delete a file or a whole directory tree.

    A missing path is not an error. Hidden entries are always deleted,
    regardless of ``config.include_hidden``. Symbolic links are unlinked and
    never followed, regardless of ``config.follow_symlinks``.

    Raises:
        DeleteFailedError: On the first entry that could not be removed
    """
    config = resolve_config(config)
    # links stay leaves so nothing outside the tree is removed
    navigator = FileNavigator(follow_symlinks=False,
                              sort_children=config.sort_children)
    root = navigator.create_node(path)

    if not root.exists():
        logger.debug("nothing to delete at %s", root.path)
        return

    if not root.is_directory():
        _remove(root)
        return

    processor = _DeleteProcessor()
    walk(PreorderWalker(root, navigator), processor)
    logger.info("deleted %s (%d entries)", root.path, processor.removed)


# ---------------------------------------------------------------------- prune

class _PruneProcessor(Processor):
    """Removes directories that are empty by the time they are post-visited."""

    def __init__(self):
        self.removed: List[Path] = []

    def pre_visit(self, node: FileSystemNode, path: TreePath) -> bool:
        return True

    def post_visit(self, node: FileSystemNode, path: TreePath) -> None:
        with os.scandir(node.path) as entries:
            empty = next(entries, None) is None
        if empty:
            _remove(node)
            self.removed.append(node.path)


def prune_empty_dirs(directory: PathLike, config: Optional[OperationsConfig] = None) -> List[Path]:
    """Delete every empty directory under ``directory``, bottom-up.

    A directory that only contained empty directories becomes empty once
    they are pruned, and is removed in the same pass. ``directory`` itself
    is removed if it ends up empty. Files are never touched; a file or a
    missing path is a no-op.

    Returns:
        The removed directories, deepest first

    Raises:
        DeleteFailedError: If an empty directory could not be removed
    """
    config = resolve_config(config)
    navigator = FileNavigator.from_config(config)
    root = navigator.create_node(directory)

    if not root.is_directory():
        return []

    processor = _PruneProcessor()
    walk(PreorderWalker(root, navigator.directories_only()), processor)
    logger.info("pruned %d empty directories under %s", len(processor.removed), root.path)
    return processor.removed


delete_empty_dirs = prune_empty_dirs


# ---------------------------------------------------------------------- mkdir

def mkdir(directory: PathLike) -> None:
    """Create ``directory`` if it doesn't exist; its parent must exist.

    Raises:
        CreateDirFailedError: If the directory does not exist afterwards
    """
    directory = Path(directory)
    if directory.is_dir():
        return
    try:
        directory.mkdir()
    except OSError as exc:
        if not directory.is_dir():
            logger.error("couldn't create directory %s: %s", directory, exc)
            raise CreateDirFailedError(directory) from exc
    logger.debug("created directory %s", directory)


def mkdirs(directory: PathLike) -> None:
    """Create ``directory`` and any missing parents.

    Raises:
        CreateDirFailedError: If the directory does not exist afterwards
    """
    directory = Path(directory)
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if not directory.is_dir():
            logger.error("couldn't create directory %s: %s", directory, exc)
            raise CreateDirFailedError(directory) from exc
    logger.debug("created directories up to %s", directory)


# ----------------------------------------------------------------------- copy

class FileCreator(ABC):
    """Policy deciding how copied files are named and written.

    ``translate`` maps every source entry name (files and directories) to
    its target name. ``create_file`` writes one target file and must make
    sure the target's parent directory exists.
    """

    @abstractmethod
    def create_file(self, source: Path, target: Path) -> None:
        pass

    def translate(self, name: str) -> str:
        return name


class DefaultFileCreator(FileCreator):
    """Copies bytes verbatim and keeps names unchanged.

    Symbolic links are recreated as links unless the config follows them.
    """

    def __init__(self, config: Optional[OperationsConfig] = None):
        self.config = resolve_config(config)

    def create_file(self, source: Path, target: Path) -> None:
        source, target = Path(source), Path(target)
        mkdirs(target.parent)
        try:
            if source.is_symlink() and not self.config.follow_symlinks:
                os.symlink(os.readlink(source), target)
            else:
                with open(source, 'rb') as src, open(target, 'wb') as dst:
                    pump(src, dst, close_input=False, close_output=False,
                         chunk_size=self.config.chunk_size)
        except OSError as exc:
            logger.error("couldn't copy %s to %s: %s", source, target, exc)
            raise CopyFailedError(source, target) from exc
        logger.debug("copied %s -> %s", source, target)


class ExtensionMappingCreator(DefaultFileCreator):
    """DefaultFileCreator that renames extensions while copying.

    Example:
        >>> copy(src, dst, ExtensionMappingCreator({'.txt': '.md'}))
    """

    def __init__(self, mapping: Dict[str, str], config: Optional[OperationsConfig] = None):
        super().__init__(config)
        self.mapping = dict(mapping)

    def translate(self, name: str) -> str:
        stem, ext = os.path.splitext(name)
        if ext in self.mapping:
            return stem + self.mapping[ext]
        return name


class _CopyProcessor(Processor):
    """Mirrors visited source nodes under a target directory.

    ``stack`` holds the target directory for every open ancestor; its top is
    the already-created parent of the node being visited.
    """

    def __init__(self, target: Path, creator: FileCreator):
        self.stack: List[Path] = [target]
        self.creator = creator
        self.created = 0

    def pre_visit(self, node: FileSystemNode, path: TreePath) -> bool:
        result = self.stack[-1] / self.creator.translate(node.name)
        self.stack.append(result)
        if node.is_directory():
            mkdirs(result)
        else:
            self.creator.create_file(node.path, result)
        self.created += 1
        return True

    def post_visit(self, node: FileSystemNode, path: TreePath) -> None:
        self.stack.pop()


def _check_not_nested(source: Path, target: Path) -> None:
    resolved_source = source.resolve()
    resolved_target = target.resolve()
    if resolved_target == resolved_source or resolved_source in resolved_target.parents:
        raise CopyFailedError(source, target,
                              f"cannot copy {source} into itself ({target})")


def copy(source: PathLike,
         target: PathLike,
         creator: Optional[FileCreator] = None,
         config: Optional[OperationsConfig] = None) -> None:
    """Copy a file, or a directory tree, to ``target``.

    For a directory, ``target`` becomes the copy of ``source`` itself and
    every entry below it is named through ``creator.translate``.

    Raises:
        CopyFailedError: If a file could not be copied, or the target lies
            inside the source directory
        CreateDirFailedError: If a target directory could not be created
    """
    config = resolve_config(config)
    if creator is None:
        creator = DefaultFileCreator(config)
    navigator = FileNavigator.from_config(config)
    root = navigator.create_node(source)
    target = Path(target)

    if not root.is_directory():
        creator.create_file(root.path, target)
        return

    _check_not_nested(root.path, target)
    mkdirs(target)

    walker = PreorderWalker(root, navigator)
    walker.step()  # the root maps onto target itself
    processor = _CopyProcessor(target, creator)
    walk(walker, processor)
    logger.info("copied %s to %s (%d entries)", root.path, target, processor.created)


def copy_into(source: PathLike,
              target_dir: PathLike,
              creator: Optional[FileCreator] = None,
              config: Optional[OperationsConfig] = None) -> Path:
    """Copy ``source`` into ``target_dir``, keeping its (translated) name.

    Returns:
        The path of the copy
    """
    config = resolve_config(config)
    if creator is None:
        creator = DefaultFileCreator(config)
    target = Path(target_dir) / creator.translate(Path(source).name)
    copy(source, target, creator, config)
    return target
