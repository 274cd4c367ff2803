"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from veganizer.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.DEFAULT_PORTION_GRAMS > 0
    assert settings.MIN_SEARCH_QUERY_LENGTH == 2


def test_log_level_is_uppercased():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="verbose")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MAX_WORKERS", "5")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings()

    assert settings.MAX_WORKERS == 5
    assert settings.LOG_LEVEL == "WARNING"
