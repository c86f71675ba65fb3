"""Root conftest — shared test configuration."""

import os

import pytest

from inspire_me.config import get_settings

# Keep tests fast and independent of a developer's .env
os.environ.setdefault("SELECTION_DELAY_MS", "0")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
