"""Application settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_MASK,
    DEFAULT_MIN_SIZE,
    DEFAULT_WORKERS,
)


class Settings(BaseSettings):
    """Application configuration.

    Values come from ``BLOCK_DEDUP_*`` environment variables or a ``.env``
    file and only provide defaults for command-line options.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLOCK_DEDUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scan settings
    block_size: int = Field(
        default=DEFAULT_BLOCK_SIZE,
        gt=0,
        description="Block size in bytes used for fingerprinting",
    )
    min_file_size: int = Field(
        default=DEFAULT_MIN_SIZE,
        ge=0,
        description="Minimum file size in bytes to consider",
    )
    mask: str = Field(
        default=DEFAULT_MASK,
        description="File name mask (* and ? wildcards, case-insensitive)",
    )
    recursive: bool = Field(
        default=True,
        description="Descend into subdirectories",
    )
    workers: int = Field(
        default=DEFAULT_WORKERS,
        ge=1,
        description="Number of fingerprinting threads",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
