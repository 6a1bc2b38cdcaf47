"""Decide which enumerated entries get fingerprinted."""

from typing import Optional

from ..common.logging import get_logger
from ..config.scan_config import ScanConfig, normalize_path
from ..detector.models import FileEntry
from .name_mask import matches

logger = get_logger(__name__)


class CandidateSelector:
    """Filters entries by type, excluded parent, size and name mask."""

    def __init__(self, config: ScanConfig) -> None:
        """Initialize selector.

        Args:
            config: Validated scan configuration
        """
        self.excluded_dirs = config.excluded_dirs
        self.min_size = config.min_size
        self.name_pattern = config.name_pattern

    def rejection_reason(self, entry: FileEntry) -> Optional[str]:
        """Return why an entry is rejected, or None if it is admitted.

        Rules are checked in order and the first failing one wins.
        """
        if not entry.is_regular_file:
            return "not a regular file"

        # Exact parent match only: files deeper below an excluded
        # directory are still candidates.
        if self.excluded_dirs and normalize_path(entry.parent) in self.excluded_dirs:
            return "parent directory excluded"

        if entry.size < self.min_size:
            return f"size {entry.size} below minimum {self.min_size}"

        if not matches(self.name_pattern, entry.name):
            return "name does not match mask"

        return None

    def admit(self, entry: FileEntry) -> bool:
        """True if the entry should be fingerprinted."""
        reason = self.rejection_reason(entry)
        if reason is not None:
            logger.debug(f"Skipping {entry.path}: {reason}")
            return False
        return True
