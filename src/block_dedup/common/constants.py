"""Constants used throughout the application."""

# Fingerprinting
DEFAULT_BLOCK_SIZE = 4096  # bytes per block
PADDING_BYTE = b"\x00"
BLOCK_HASH_MASK = 0xFFFFFFFF

# Candidate selection
DEFAULT_MIN_SIZE = 1  # empty files are skipped by default
DEFAULT_MASK = "*"

# Scanning
DEFAULT_WORKERS = 1

# Exit codes
EXIT_ERROR = 1
EXIT_CANCELLED = 130
