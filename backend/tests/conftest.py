"""Root conftest — shared test configuration."""

import os

import pytest

# Pin formatting settings so a developer's .env can't change expected strings
os.environ.setdefault("CURRENCY_SYMBOL", "$")
os.environ.setdefault("PRICE_UNAVAILABLE_TEXT", "Price not available")

from crm_admin.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so monkeypatched env vars take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
