"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from tally.config import TallySettings, get_settings


def test_defaults():
    settings = TallySettings()

    assert settings.strict_shapes is True
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TALLY_LOG_LEVEL", "debug")
    monkeypatch.setenv("TALLY_STRICT_SHAPES", "0")

    settings = TallySettings()

    assert settings.log_level == "DEBUG"
    assert settings.strict_shapes is False


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        TallySettings(log_level="loud")


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("TALLY_STRICT_SHAPES", "false")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().strict_shapes is False
