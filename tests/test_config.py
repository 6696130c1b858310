"""Tests for OperationsConfig."""

import pytest

from treeops import delete, ConfigError, OperationsConfig
from treeops.config import resolve_config


def test_defaults_are_valid():
    config = OperationsConfig()
    assert config.validate() == []
    assert config.follow_symlinks is False
    assert config.include_hidden is True
    assert config.chunk_size == 64 * 1024


@pytest.mark.parametrize("chunk_size, message", [
    (0, "chunk_size must be positive"),
    (-5, "chunk_size must be positive"),
    ("big", "chunk_size must be an integer"),
    (True, "chunk_size must be an integer"),
])
def test_invalid_chunk_size(chunk_size, message):
    config = OperationsConfig(chunk_size=chunk_size)
    assert config.validate() == [message]
    with pytest.raises(ConfigError, match=message):
        config.check()


def test_resolve_config():
    assert resolve_config(None) == OperationsConfig()
    with pytest.raises(ConfigError):
        resolve_config(OperationsConfig(chunk_size=0))


def test_operations_reject_invalid_config(tmp_path):
    with pytest.raises(ConfigError):
        delete(tmp_path / "anything", OperationsConfig(chunk_size=0))


def test_from_env():
    config = OperationsConfig.from_env({
        "TREEOPS_FOLLOW_SYMLINKS": "yes",
        "TREEOPS_INCLUDE_HIDDEN": "0",
        "TREEOPS_CHUNK_SIZE": "4096",
    })
    assert config == OperationsConfig(follow_symlinks=True, include_hidden=False, chunk_size=4096)


def test_from_env_empty_keeps_defaults():
    assert OperationsConfig.from_env({}) == OperationsConfig()


@pytest.mark.parametrize("environ", [
    {"TREEOPS_FOLLOW_SYMLINKS": "maybe"},
    {"TREEOPS_CHUNK_SIZE": "lots"},
    {"TREEOPS_CHUNK_SIZE": "-1"},
])
def test_from_env_rejects_bad_values(environ):
    with pytest.raises(ConfigError):
        OperationsConfig.from_env(environ)
