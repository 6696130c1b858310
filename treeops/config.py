"""Configuration for treeops file operations.

OperationsConfig gathers the knobs shared by every file operation: how the
filesystem navigator lists directories and how bytes are pumped during copy.
"""

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .errors import ConfigError


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

DEFAULT_CHUNK_SIZE = 64 * 1024


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


@dataclass
class OperationsConfig:
    """Settings shared by delete, copy, mkdir and prune.

    Attributes:
        follow_symlinks: Descend into symlinked directories. When False,
            links are treated as leaves (deleted or recreated as links).
        include_hidden: Include entries whose name starts with a dot.
        chunk_size: Buffer size in bytes used when pumping file contents.
        sort_children: List directory entries in name order.
    """

    follow_symlinks: bool = False
    include_hidden: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE
    sort_children: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'OperationsConfig':
        """Build a config from ``TREEOPS_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ConfigError: If a variable cannot be parsed or the result is invalid
        """
        environ = os.environ if environ is None else environ
        config = cls()

        if "TREEOPS_FOLLOW_SYMLINKS" in environ:
            config.follow_symlinks = _parse_bool(
                "TREEOPS_FOLLOW_SYMLINKS", environ["TREEOPS_FOLLOW_SYMLINKS"])
        if "TREEOPS_INCLUDE_HIDDEN" in environ:
            config.include_hidden = _parse_bool(
                "TREEOPS_INCLUDE_HIDDEN", environ["TREEOPS_INCLUDE_HIDDEN"])
        if "TREEOPS_CHUNK_SIZE" in environ:
            raw = environ["TREEOPS_CHUNK_SIZE"]
            try:
                config.chunk_size = int(raw)
            except ValueError:
                raise ConfigError(f"TREEOPS_CHUNK_SIZE must be an integer, got {raw!r}") from None

        config.check()
        return config

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.chunk_size, int) or isinstance(self.chunk_size, bool):
            errors.append("chunk_size must be an integer")
        elif self.chunk_size <= 0:
            errors.append("chunk_size must be positive")
        return errors

    def check(self) -> None:
        """Raise ConfigError if validate() reports any problem."""
        errors = self.validate()
        if errors:
            raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")


def resolve_config(config: Optional[OperationsConfig]) -> OperationsConfig:
    """Return ``config`` after validation, or the defaults when None."""
    if config is None:
        return OperationsConfig()
    config.check()
    return config
