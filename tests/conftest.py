import pytest

from drivegallery import page_state
from drivegallery.config import get_settings


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Known settings for every test: an API key and no fetch delay."""
    monkeypatch.setenv("DRIVEGALLERY_GOOGLE_API_KEY", "test-key")
    monkeypatch.setenv("DRIVEGALLERY_FETCH_DELAY", "0")
    get_settings.cache_clear()
    page_state.clear()
    yield
    page_state.clear()
    get_settings.cache_clear()
