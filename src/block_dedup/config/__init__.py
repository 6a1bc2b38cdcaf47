"""Scan configuration and application settings."""
