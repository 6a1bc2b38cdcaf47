"""Directory enumeration and candidate selection."""
