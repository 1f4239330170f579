"""Tests for environment driven settings."""

import logging
from pathlib import Path

import pytest

from briefcount.config import Settings, configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BRIEFCOUNT_RESULTS_DIR", raising=False)
    monkeypatch.delenv("BRIEFCOUNT_LOG_LEVEL", raising=False)

    settings = Settings.from_env()

    assert settings.results_dir == Path("results")
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BRIEFCOUNT_RESULTS_DIR", "/tmp/pool")
    monkeypatch.setenv("BRIEFCOUNT_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.results_dir == Path("/tmp/pool")
    assert settings.log_level == "DEBUG"


def test_settings_are_frozen() -> None:
    with pytest.raises(AttributeError):
        Settings().log_level = "DEBUG"  # type: ignore[misc]


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="NOISY"):
        configure_logging(Settings(log_level="NOISY"))


def test_configure_logging_accepts_known_level() -> None:
    configure_logging(Settings(log_level="WARNING"))
    assert logging.getLogger().handlers
