import io
from datetime import datetime, timezone

import pytest

from jsonpropfilter.config import get_settings
from jsonpropfilter.events import LogEvent, LogEventLevel


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Settings are cached; isolate every test from the caller's environment
    for name in (
        "JSONPROPFILTER_ENV",
        "JSONPROPFILTER_CLOSING_DELIMITER",
        "JSONPROPFILTER_RENDER_MESSAGE",
        "JSONPROPFILTER_ALLOW_PROPERTIES",
        "JSONPROPFILTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sink():
    """In-memory text sink."""
    return io.StringIO()


@pytest.fixture
def timestamp():
    return datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_event(timestamp):
    """Factory for events with a fixed timestamp."""

    def _make(template="Hello {Name}", properties=None, **kwargs):
        kwargs.setdefault("timestamp", timestamp)
        kwargs.setdefault("level", LogEventLevel.Information)
        return LogEvent.create(template, properties, **kwargs)

    return _make
