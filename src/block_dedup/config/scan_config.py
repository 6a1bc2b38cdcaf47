"""Immutable configuration for a single scan."""

import os
import re
from dataclasses import dataclass, field
from typing import Iterable

from ..common.constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_MASK,
    DEFAULT_MIN_SIZE,
    DEFAULT_WORKERS,
)
from ..common.exceptions import ConfigError
from ..scanner.name_mask import compile_mask


def normalize_path(path: str) -> str:
    """Absolute, normalised form of a path (``~`` expanded)."""
    return os.path.abspath(os.path.expanduser(str(path)))


@dataclass(frozen=True)
class ScanConfig:
    """Everything the engine needs to run one scan.

    Validated on construction; any problem raises :class:`ConfigError`
    before a single file is read.
    """

    directories: tuple[str, ...]
    excluded_dirs: frozenset[str] = frozenset()
    mask: str = DEFAULT_MASK
    min_size: int = DEFAULT_MIN_SIZE
    block_size: int = DEFAULT_BLOCK_SIZE
    recursive: bool = True
    workers: int = DEFAULT_WORKERS
    name_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.directories, str):
            raise ConfigError("Directories must be given as a list of paths")
        directories = tuple(dict.fromkeys(normalize_path(d) for d in self.directories))
        if not directories:
            raise ConfigError("At least one directory to scan is required")
        for directory in directories:
            if not os.path.exists(directory):
                raise ConfigError(f"Directory does not exist: {directory}")
            if not os.path.isdir(directory):
                raise ConfigError(f"Not a directory: {directory}")

        if self.block_size <= 0:
            raise ConfigError(f"Block size must be positive, got {self.block_size}")
        if self.min_size < 0:
            raise ConfigError(f"Minimum size cannot be negative, got {self.min_size}")
        if self.workers < 1:
            raise ConfigError(f"Workers must be at least 1, got {self.workers}")

        object.__setattr__(self, "directories", directories)
        object.__setattr__(
            self, "excluded_dirs", frozenset(normalize_path(d) for d in self.excluded_dirs)
        )
        object.__setattr__(self, "name_pattern", compile_mask(self.mask))

    @classmethod
    def create(
        cls,
        directories: Iterable[str],
        excluded_dirs: Iterable[str] = (),
        **options: object,
    ) -> "ScanConfig":
        """Build a config from any iterables of paths."""
        return cls(
            directories=tuple(directories),
            excluded_dirs=frozenset(excluded_dirs),
            **options,  # type: ignore[arg-type]
        )
