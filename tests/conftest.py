"""Pytest configuration and shared fixtures."""

import pytest

from icsinvite.config.env import EnvConfig
from icsinvite.config.settings import IcsSettings
from icsinvite.models.event import EventRecord


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's ICSINVITE_* variables out of the tests."""
    for env_var in EnvConfig.ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("ICSINVITE_CONFIG_DIR", raising=False)
    yield

@pytest.fixture
def settings():
    """Default rendering settings."""
    return IcsSettings()

@pytest.fixture
def event_properties():
    """Property map for a complete, valid event."""
    return {
        "uid": "event-1@example.com",
        "type": "meeting",
        "summary": "Planning",
        "start": "2024-01-15T09:30:00Z",
        "end": "2024-01-15T10:30:00Z",
        "organiser": {"name": "Olga", "email": "olga@example.com"},
        "attendees": [{"email": "a@x.com", "name": "Alice"}],
        "description": "Quarterly review",
        "location": "Room 4",
    }

@pytest.fixture
def valid_record(event_properties, settings):
    """A record that passes validation."""
    return EventRecord(event_properties, settings=settings)
