"""Local directory enumeration."""

import os
import stat
from typing import Callable, Iterator, Optional

from ..common.exceptions import PathAccessError
from ..common.logging import get_logger
from ..detector.models import FileEntry

logger = get_logger(__name__)

ErrorCallback = Callable[[PathAccessError], None]


def _log_error(error: PathAccessError) -> None:
    logger.warning(str(error))


def make_entry(path: str) -> FileEntry:
    """Describe one path, following symlinks.

    A dangling symlink is reported as a non-regular entry.

    Raises:
        PathAccessError: If the entry's metadata cannot be read
    """
    try:
        st = os.stat(path)
    except FileNotFoundError as e:
        if os.path.islink(path):
            return FileEntry(path=path, size=0, is_regular_file=False)
        raise PathAccessError(path, "Cannot stat entry", e) from e
    except OSError as e:
        raise PathAccessError(path, "Cannot stat entry", e) from e

    return FileEntry(path=path, size=st.st_size, is_regular_file=stat.S_ISREG(st.st_mode))


def _entries(
    root: str, names: list[str], on_error: ErrorCallback
) -> Iterator[FileEntry]:
    for name in sorted(names):
        try:
            yield make_entry(os.path.join(root, name))
        except PathAccessError as e:
            on_error(e)


def enumerate_entries(
    directory: str,
    recursive: bool = True,
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[FileEntry]:
    """Yield every entry below ``directory``.

    Args:
        directory: Directory to enumerate
        recursive: If False, only the directory's immediate entries are listed
        on_error: Called with a PathAccessError for each unreadable
            directory or entry; defaults to logging a warning

    Yields:
        FileEntry for files, directories and special files alike. Symlinked
        directories are listed but never descended into.
    """
    report = on_error or _log_error

    if not recursive:
        try:
            names = os.listdir(directory)
        except OSError as e:
            report(PathAccessError(directory, "Cannot list directory", e))
            return
        yield from _entries(directory, names, report)
        return

    def walk_error(e: OSError) -> None:
        report(PathAccessError(e.filename or directory, "Cannot list directory", e))

    for root, dirs, files in os.walk(directory, onerror=walk_error):
        dirs.sort()
        yield from _entries(root, dirs + files, report)
