"""block-dedup: find duplicate files by per-block CRC-32 fingerprints."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("block-dedup")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .config.scan_config import ScanConfig
from .detector.fingerprint import BlockFingerprinter, fingerprint_file, fingerprint_stream
from .detector.grouper import DuplicateGrouper
from .detector.models import CandidateFile, DuplicateGroup, Fingerprint, ScanResult
from .detector.pipeline import ScanPipeline

__all__ = [
    "BlockFingerprinter",
    "CandidateFile",
    "DuplicateGroup",
    "DuplicateGrouper",
    "Fingerprint",
    "ScanConfig",
    "ScanPipeline",
    "ScanResult",
    "fingerprint_file",
    "fingerprint_stream",
    "__version__",
]
