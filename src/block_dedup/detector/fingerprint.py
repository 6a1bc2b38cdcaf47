"""Block fingerprinting: per-block CRC-32 checksums of file content."""

import zlib
from typing import BinaryIO

from ..common.constants import BLOCK_HASH_MASK, DEFAULT_BLOCK_SIZE, PADDING_BYTE
from ..common.exceptions import ConfigError, PathAccessError, ReadFailure
from ..common.logging import get_logger
from .models import CandidateFile, FileEntry, Fingerprint

logger = get_logger(__name__)


def _check_block_size(block_size: int) -> None:
    if block_size <= 0:
        raise ConfigError(f"Block size must be positive, got {block_size}")


def _read_block(stream: BinaryIO, block_size: int) -> bytes:
    """Read up to block_size bytes, retrying short reads until EOF."""
    chunks = []
    remaining = block_size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def block_hash(block: bytes, block_size: int) -> int:
    """CRC-32 of one block, zero-padded to block_size when short."""
    if len(block) < block_size:
        block = block + PADDING_BYTE * (block_size - len(block))
    return zlib.crc32(block) & BLOCK_HASH_MASK


def fingerprint_stream(stream: BinaryIO, block_size: int = DEFAULT_BLOCK_SIZE) -> Fingerprint:
    """Fingerprint a readable binary stream.

    The stream is consumed in blocks of ``block_size`` bytes. A short,
    non-empty final block is padded with zero bytes before hashing, so a
    file and the same file with trailing zeros inside its last block yield
    the same fingerprint. An empty stream yields an empty fingerprint.

    Args:
        stream: Binary stream positioned at the start of the content
        block_size: Bytes per block

    Returns:
        Fingerprint with one hash per block, in offset order

    Raises:
        ConfigError: If block_size is not positive
        OSError: If reading from the stream fails
    """
    _check_block_size(block_size)

    hashes = []
    while True:
        block = _read_block(stream, block_size)
        if not block:
            break
        hashes.append(block_hash(block, block_size))
        if len(block) < block_size:
            break

    return Fingerprint(tuple(hashes))


def fingerprint_file(path: str, block_size: int = DEFAULT_BLOCK_SIZE) -> Fingerprint:
    """Fingerprint the file at ``path``.

    Raises:
        ConfigError: If block_size is not positive
        PathAccessError: If the file cannot be opened
        ReadFailure: If a read fails after the file was opened
    """
    _check_block_size(block_size)

    try:
        stream = open(path, "rb")
    except OSError as e:
        raise PathAccessError(path, "Cannot open file", e) from e

    with stream:
        try:
            return fingerprint_stream(stream, block_size)
        except OSError as e:
            raise ReadFailure(path, "Read failed", e) from e


class BlockFingerprinter:
    """Turns selected entries into candidate files."""

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        """Initialize fingerprinter.

        Args:
            block_size: Bytes per block, must be positive
        """
        _check_block_size(block_size)
        self.block_size = block_size

    def fingerprint(self, entry: FileEntry) -> CandidateFile:
        """Fingerprint one entry.

        Raises:
            PathAccessError: If the file cannot be opened
            ReadFailure: If reading the file fails
        """
        fingerprint = fingerprint_file(entry.path, self.block_size)
        logger.debug(f"Fingerprinted {entry.path}: {len(fingerprint)} blocks")
        return CandidateFile(path=entry.path, size=entry.size, fingerprint=fingerprint)
