"""Settings — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from crm_admin.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.currency_symbol == "$"
    assert settings.price_unavailable_text == "Price not available"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.log_format == "text"
    assert settings.log_level == "DEBUG"


def test_invalid_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
