"""Tests for pruning empty directories."""

import os
from pathlib import Path

import pytest

from treeops import prune_empty_dirs, delete_empty_dirs, DeleteFailedError


def test_scenario_keeps_root_with_file(tmp_path):
    """/a/{b/empty/, c.txt}: b/empty and b go, a and c.txt stay."""
    a = tmp_path / "a"
    (a / "b" / "empty").mkdir(parents=True)
    (a / "c.txt").write_text("c")

    removed = prune_empty_dirs(a)

    assert removed == [a / "b" / "empty", a / "b"]
    assert a.is_dir()
    assert (a / "c.txt").read_text() == "c"
    assert not (a / "b").exists()


def test_directories_with_files_never_removed(tmp_path):
    root = tmp_path / "root"
    (root / "keep" / "deeper").mkdir(parents=True)
    (root / "keep" / "deeper" / "file.txt").write_text("x")
    (root / "drop" / "x" / "y").mkdir(parents=True)
    (root / "mixed" / "gone").mkdir(parents=True)
    (root / "mixed" / ".dotfile").write_text("")

    prune_empty_dirs(root)

    assert (root / "keep" / "deeper" / "file.txt").exists()
    assert not (root / "drop").exists()
    assert not (root / "mixed" / "gone").exists()
    assert (root / "mixed" / ".dotfile").exists()
    assert root.is_dir()


def test_root_removed_when_everything_empty(tmp_path):
    root = tmp_path / "root"
    (root / "a" / "b").mkdir(parents=True)
    (root / "c").mkdir()

    removed = prune_empty_dirs(root)

    assert not root.exists()
    assert removed[-1] == root
    assert set(removed) == {root / "a" / "b", root / "a", root / "c", root}


def test_prune_file_is_noop(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    assert prune_empty_dirs(target) == []
    assert target.exists()


def test_prune_missing_is_noop(tmp_path):
    assert prune_empty_dirs(tmp_path / "missing") == []


def test_alias(tmp_path):
    (tmp_path / "root" / "empty").mkdir(parents=True)
    (tmp_path / "root" / "f").write_text("f")
    assert delete_empty_dirs(tmp_path / "root") == [tmp_path / "root" / "empty"]


def test_removal_failure(tmp_path, monkeypatch):
    root = tmp_path / "root"
    (root / "stuck").mkdir(parents=True)

    def rmdir(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "rmdir", rmdir)

    with pytest.raises(DeleteFailedError) as exc_info:
        prune_empty_dirs(root)
    assert exc_info.value.path == root / "stuck"
