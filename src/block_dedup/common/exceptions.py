"""Custom exception hierarchy."""

from typing import Optional


class BlockDedupError(Exception):
    """Base exception for all block-dedup errors."""


class ConfigError(BlockDedupError):
    """Invalid scan configuration (bad mask, block size, directory...)."""


class FileAccessError(BlockDedupError):
    """A single file or directory could not be processed.

    These errors are local to one path: the scan records them and continues.
    """

    kind = "error"

    def __init__(self, path: str, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message
        self.cause = cause


class PathAccessError(FileAccessError):
    """A path could not be opened or stat'ed."""

    kind = "access"


class ReadFailure(FileAccessError):
    """Reading a file failed part way through fingerprinting."""

    kind = "read"
