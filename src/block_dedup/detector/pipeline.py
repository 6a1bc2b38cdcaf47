"""Scan pipeline: enumerate, select, fingerprint, group."""

import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Callable, Optional, Union

from ..common.exceptions import FileAccessError, PathAccessError
from ..common.logging import get_logger
from ..config.scan_config import ScanConfig
from ..scanner.enumerator import enumerate_entries
from ..scanner.selector import CandidateSelector
from .fingerprint import BlockFingerprinter
from .grouper import DuplicateGrouper
from .models import CandidateFile, FileEntry, FileFailure, ScanResult

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]
Outcome = Union[CandidateFile, FileFailure]


class ScanPipeline:
    """Orchestrates one duplicate scan."""

    def __init__(self, config: ScanConfig) -> None:
        """Initialize scan pipeline.

        Args:
            config: Validated scan configuration
        """
        self.config = config
        self.selector = CandidateSelector(config)
        self.fingerprinter = BlockFingerprinter(config.block_size)
        self.grouper = DuplicateGrouper()

    def run(
        self,
        cancel_event: Optional[threading.Event] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> ScanResult:
        """Run the scan.

        Args:
            cancel_event: When set, the scan stops at the next file boundary
                and the result is marked partial
            progress: Called as ``progress(done, total)`` after each file

        Returns:
            ScanResult with duplicate groups and per-file failures
        """
        result = ScanResult()
        logger.info(f"Starting scan of {len(self.config.directories)} directories")

        entries = self._collect_candidates(result, cancel_event)
        if self._cancelled(cancel_event):
            result.partial = True

        candidates: list[CandidateFile] = []
        if not result.partial:
            done = self._fingerprint_all(entries, candidates, result, cancel_event, progress)
            if done < len(entries):
                result.partial = True

        result.candidates = len(candidates)
        result.groups = self.grouper.group(candidates)
        result.failures.sort(key=lambda f: f.path)

        if result.partial:
            logger.warning(
                f"Scan cancelled: results cover {len(candidates)} of "
                f"{len(entries)} candidate files"
            )
        logger.info(
            f"Scan complete: {result.entries_seen} entries, {result.candidates} "
            f"candidates, {len(result.groups)} groups, {len(result.failures)} failures"
        )
        return result

    def _collect_candidates(
        self, result: ScanResult, cancel_event: Optional[threading.Event]
    ) -> list[FileEntry]:
        """Enumerate all directories and keep the entries the selector admits."""

        def on_error(error: PathAccessError) -> None:
            logger.warning(str(error))
            result.failures.append(FileFailure.from_error(error))

        seen: set[str] = set()
        selected: list[FileEntry] = []

        for directory in self.config.directories:
            logger.info(f"Enumerating {directory} (recursive={self.config.recursive})")
            for entry in enumerate_entries(directory, self.config.recursive, on_error):
                if self._cancelled(cancel_event):
                    return selected
                if entry.path in seen:
                    continue
                seen.add(entry.path)
                result.entries_seen += 1
                if self.selector.admit(entry):
                    selected.append(entry)

        logger.info(f"Selected {len(selected)} of {result.entries_seen} entries")
        return selected

    def _fingerprint_one(self, entry: FileEntry) -> Outcome:
        try:
            return self.fingerprinter.fingerprint(entry)
        except FileAccessError as e:
            logger.warning(str(e))
            return FileFailure.from_error(e)

    def _fingerprint_all(
        self,
        entries: list[FileEntry],
        candidates: list[CandidateFile],
        result: ScanResult,
        cancel_event: Optional[threading.Event],
        progress: Optional[ProgressCallback],
    ) -> int:
        """Fingerprint entries, appending outcomes from the calling thread only.

        Returns:
            Number of entries processed
        """
        total = len(entries)
        done = 0

        def record(outcome: Outcome) -> None:
            nonlocal done
            if isinstance(outcome, FileFailure):
                result.failures.append(outcome)
            else:
                candidates.append(outcome)
            done += 1
            if progress:
                progress(done, total)

        if self.config.workers == 1:
            for entry in entries:
                if self._cancelled(cancel_event):
                    break
                record(self._fingerprint_one(entry))
            return done

        # Keep at most 2 * workers files in flight so a cancel takes effect quickly.
        pending: set[Future[Outcome]] = set()
        queue = iter(entries)
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            while True:
                while len(pending) < self.config.workers * 2 and not self._cancelled(cancel_event):
                    entry = next(queue, None)
                    if entry is None:
                        break
                    pending.add(executor.submit(self._fingerprint_one, entry))

                if not pending:
                    break

                finished, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in finished:
                    record(future.result())

        return done

    @staticmethod
    def _cancelled(cancel_event: Optional[threading.Event]) -> bool:
        return cancel_event is not None and cancel_event.is_set()
