"""Shared constants, errors and logging."""
