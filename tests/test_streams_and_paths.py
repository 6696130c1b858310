"""Tests for the pump stream helper and the path constants."""

import io
import os
import sys
from pathlib import Path

import pytest

from treeops.streams import pump
from treeops import paths


class TrackingBytesIO(io.BytesIO):
    """BytesIO that remembers it was closed and keeps its value readable."""

    def __init__(self, *args):
        super().__init__(*args)
        self.was_closed = False
        self.final = b""

    def close(self):
        self.final = self.getvalue()
        self.was_closed = True
        super().close()


class FailingReader(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device went away")


def test_pump_copies_and_closes():
    data = os.urandom(10_000)
    source, target = TrackingBytesIO(data), TrackingBytesIO()

    copied = pump(source, target, chunk_size=1024)

    assert copied == len(data)
    assert source.was_closed and target.was_closed
    assert target.final == data


def test_pump_respects_close_flags():
    source, target = io.BytesIO(b"abc"), io.BytesIO()
    pump(source, target, close_input=False, close_output=False)
    assert not source.closed and not target.closed
    assert target.getvalue() == b"abc"


def test_pump_closes_on_failure():
    source, target = FailingReader(), TrackingBytesIO()
    with pytest.raises(OSError, match="device went away"):
        pump(source, target)
    assert source.closed
    assert target.was_closed


def test_path_constants():
    assert paths.SEPARATOR == os.sep
    assert paths.PATH_SEPARATOR == os.pathsep
    assert paths.LINE_SEPARATOR == os.linesep
    assert paths.PYTHON_HOME == Path(sys.prefix)
    assert paths.USER_HOME == Path.home()
    assert paths.TMP_DIR.is_dir()


def test_to_url(tmp_path):
    target = tmp_path / "a b.txt"
    url = paths.to_url(target)
    assert url.startswith("file://")
    assert url.endswith("a%20b.txt")


def test_to_url_relative_is_absolute():
    assert paths.to_url("x.txt") == (Path.cwd() / "x.txt").as_uri()


def test_paths_exposed_on_package():
    import treeops

    assert treeops.paths is paths
    assert "paths" in treeops.__all__
