"""Settings tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from slipstats import config


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SPORT_ALIASES", '{"epl": "Soccer"}')
    settings = config.Settings()
    assert settings.log_level == "DEBUG"
    assert settings.sport_aliases == {"epl": "Soccer"}


def test_settings_reject_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        config.Settings()


def test_get_settings_is_cached(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    config.get_settings.cache_clear()
    try:
        assert config.get_settings() is config.get_settings()
    finally:
        config.get_settings.cache_clear()
