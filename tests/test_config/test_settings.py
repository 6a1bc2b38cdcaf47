"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from block_dedup.config.settings import Settings, get_settings, reset_settings


def test_defaults() -> None:
    """Without environment overrides the documented defaults apply."""
    settings = Settings()

    assert settings.block_size == 4096
    assert settings.min_file_size == 1
    assert settings.mask == "*"
    assert settings.recursive is True
    assert settings.workers == 1
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """BLOCK_DEDUP_* variables override defaults."""
    monkeypatch.setenv("BLOCK_DEDUP_BLOCK_SIZE", "512")
    monkeypatch.setenv("BLOCK_DEDUP_RECURSIVE", "false")
    monkeypatch.setenv("BLOCK_DEDUP_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.block_size == 512
    assert settings.recursive is False
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "key,value",
    [
        ("BLOCK_DEDUP_BLOCK_SIZE", "0"),
        ("BLOCK_DEDUP_WORKERS", "0"),
        ("BLOCK_DEDUP_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_environment(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    """Invalid values fail validation."""
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached() -> None:
    """get_settings returns one instance until reset."""
    first = get_settings()

    assert get_settings() is first
    reset_settings()
    assert get_settings() is not first
