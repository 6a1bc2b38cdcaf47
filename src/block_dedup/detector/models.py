"""Data models for scanned entries, fingerprints and duplicate groups."""

import os
import struct
from dataclasses import dataclass, field

from ..common.exceptions import FileAccessError


@dataclass(frozen=True)
class FileEntry:
    """A filesystem entry as produced by directory enumeration."""

    path: str
    size: int
    is_regular_file: bool

    @property
    def parent(self) -> str:
        """Immediate parent directory of the entry."""
        return os.path.dirname(self.path)

    @property
    def name(self) -> str:
        """Final path component."""
        return os.path.basename(self.path)


@dataclass(frozen=True)
class Fingerprint:
    """Ordered per-block CRC-32 checksums of a file."""

    hashes: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.hashes)

    @property
    def key(self) -> bytes:
        """Canonical byte form: hashes as little-endian uint32, in order."""
        return struct.pack(f"<{len(self.hashes)}I", *self.hashes)


@dataclass(frozen=True)
class CandidateFile:
    """A selected file together with its computed fingerprint."""

    path: str
    size: int
    fingerprint: Fingerprint


@dataclass(frozen=True)
class FileFailure:
    """A path that could not be fingerprinted."""

    path: str
    kind: str
    message: str

    @classmethod
    def from_error(cls, error: FileAccessError) -> "FileFailure":
        """Build a failure record from a per-file exception."""
        detail = error.message
        if error.cause is not None:
            detail = f"{detail} ({error.cause})"
        return cls(path=error.path, kind=error.kind, message=detail)


@dataclass(frozen=True)
class DuplicateGroup:
    """A group of files sharing one fingerprint.

    Paths are distinct and sorted lexicographically.
    """

    group_id: int
    key: bytes
    fingerprint: Fingerprint
    paths: tuple[str, ...]
    size: int

    @property
    def count(self) -> int:
        """Number of duplicate files in this group."""
        return len(self.paths)

    @property
    def total_size(self) -> int:
        """Total size of all duplicates in this group."""
        return self.size * self.count

    @property
    def wasted_size(self) -> int:
        """Wasted space (size of all duplicates except one)."""
        return self.size * (self.count - 1)

    @property
    def block_count(self) -> int:
        """Number of blocks in the shared fingerprint."""
        return len(self.fingerprint)


@dataclass
class ScanResult:
    """Outcome of one scan: duplicate groups plus per-file failures."""

    groups: list[DuplicateGroup] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    entries_seen: int = 0
    candidates: int = 0
    partial: bool = False

    @property
    def duplicate_files(self) -> int:
        """Number of files that belong to some group."""
        return sum(g.count for g in self.groups)

    @property
    def wasted_size(self) -> int:
        """Bytes that could be reclaimed by keeping one file per group."""
        return sum(g.wasted_size for g in self.groups)
