"""Tests for environment-driven settings."""

import pytest

from weekcal.config.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WEEKCAL_LOG_LEVEL", "WEEKCAL_LOG_FILE", "WEEKCAL_DEFAULT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None)
    assert config.log_level == "WARNING"
    assert config.log_file is None
    assert config.default_format == "D"


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEEKCAL_LOG_LEVEL", "debug")
    monkeypatch.setenv("WEEKCAL_LOG_FILE", "logs/weekcal.log")
    monkeypatch.setenv("WEEKCAL_DEFAULT_FORMAT", "YYYYWwwD")
    config = Settings(_env_file=None)
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/weekcal.log"
    assert config.default_format == "YYYYWwwD"


def test_invalid_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEEKCAL_LOG_LEVEL", "verbose")
    assert Settings(_env_file=None).log_level == "WARNING"


def test_invalid_default_format_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEEKCAL_DEFAULT_FORMAT", "iso")
    assert Settings(_env_file=None).default_format == "D"
