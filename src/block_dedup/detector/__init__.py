"""Fingerprinting, grouping and the scan pipeline."""
