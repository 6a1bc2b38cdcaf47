"""Tests for directory enumeration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from block_dedup.common.exceptions import PathAccessError
from block_dedup.scanner.enumerator import enumerate_entries, make_entry


def test_recursive_lists_nested_files(make_file, tmp_path: Path) -> None:
    """Recursive enumeration reaches every level."""
    make_file("a.txt", b"1")
    make_file("sub/b.txt", b"22")
    make_file("sub/deeper/c.txt", b"333")

    files = {
        e.path: e.size
        for e in enumerate_entries(str(tmp_path), recursive=True)
        if e.is_regular_file
    }

    assert files == {
        str(tmp_path / "a.txt"): 1,
        str(tmp_path / "sub" / "b.txt"): 2,
        str(tmp_path / "sub" / "deeper" / "c.txt"): 3,
    }


def test_flat_lists_only_top_level(make_file, tmp_path: Path) -> None:
    """Flat enumeration does not descend."""
    make_file("a.txt", b"1")
    make_file("sub/b.txt", b"2")

    entries = list(enumerate_entries(str(tmp_path), recursive=False))

    assert sorted(e.name for e in entries) == ["a.txt", "sub"]
    assert [e.is_regular_file for e in entries if e.name == "sub"] == [False]


def test_directories_are_not_regular(make_file, tmp_path: Path) -> None:
    """Directory entries are reported as non-regular."""
    make_file("sub/file.bin", b"x")

    entries = {e.name: e for e in enumerate_entries(str(tmp_path))}

    assert not entries["sub"].is_regular_file
    assert entries["file.bin"].is_regular_file


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks(make_file, tmp_path: Path) -> None:
    """File symlinks count as regular files, dangling ones do not."""
    target = make_file("target.txt", b"data")
    (tmp_path / "link.txt").symlink_to(target)
    (tmp_path / "dangling.txt").symlink_to(tmp_path / "missing.txt")

    entries = {e.name: e for e in enumerate_entries(str(tmp_path))}

    assert entries["link.txt"].is_regular_file
    assert entries["link.txt"].size == 4
    assert not entries["dangling.txt"].is_regular_file


def test_unreadable_directory_reported(tmp_path: Path) -> None:
    """Listing errors are handed to the error callback, not raised."""
    errors: list[PathAccessError] = []
    missing = tmp_path / "gone"

    entries = list(enumerate_entries(str(missing), recursive=False, on_error=errors.append))

    assert entries == []
    assert [e.path for e in errors] == [str(missing)]


def test_unreadable_subdirectory_reported(make_file, tmp_path: Path) -> None:
    """Walk errors are reported and enumeration continues."""
    make_file("ok.txt", b"1")
    errors: list[PathAccessError] = []

    def fake_walk(top, onerror=None):
        onerror(PermissionError(13, "Permission denied", str(tmp_path / "locked")))
        yield str(tmp_path), [], ["ok.txt"]

    with patch("block_dedup.scanner.enumerator.os.walk", fake_walk):
        entries = list(enumerate_entries(str(tmp_path), on_error=errors.append))

    assert [e.name for e in entries] == ["ok.txt"]
    assert [e.path for e in errors] == [str(tmp_path / "locked")]


def test_stat_failure_raises_path_access_error(tmp_path: Path) -> None:
    """make_entry wraps stat errors."""
    with patch("block_dedup.scanner.enumerator.os.stat", side_effect=PermissionError("denied")):
        with pytest.raises(PathAccessError):
            make_entry(str(tmp_path / "secret.bin"))
