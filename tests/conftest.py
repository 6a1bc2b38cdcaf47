"""Shared pytest fixtures."""

import os
from pathlib import Path
from typing import Callable, Iterator

import pytest

from block_dedup.config.settings import reset_settings
from block_dedup.detector.models import CandidateFile, FileEntry, Fingerprint

FileFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from BLOCK_DEDUP_* variables and the settings singleton."""
    for key in list(os.environ):
        if key.startswith("BLOCK_DEDUP_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_file(tmp_path: Path) -> FileFactory:
    """Create a file under tmp_path with the given content."""

    def _make(relative: str, content: bytes = b"") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def sample_tree(make_file: FileFactory, tmp_path: Path) -> Path:
    """Three text files: a.txt and b.txt identical, c.txt different."""
    make_file("a.txt", b"X")
    make_file("b.txt", b"X")
    make_file("c.txt", b"Y")
    return tmp_path


@pytest.fixture
def make_candidate() -> Callable[..., CandidateFile]:
    """Build a candidate with a given fingerprint."""

    def _make(path: str, hashes: tuple[int, ...], size: int = 10) -> CandidateFile:
        return CandidateFile(path=path, size=size, fingerprint=Fingerprint(hashes))

    return _make


@pytest.fixture
def make_entry() -> Callable[..., FileEntry]:
    """Build a file entry."""

    def _make(path: str, size: int = 10, is_regular_file: bool = True) -> FileEntry:
        return FileEntry(path=path, size=size, is_regular_file=is_regular_file)

    return _make
