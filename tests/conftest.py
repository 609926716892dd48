from datetime import datetime, timezone

import pytest

from wellknown.calendar import CalendarEvent, default_registry


def make_event(**overrides) -> CalendarEvent:
    values = {
        "title": "Team Meeting",
        "start_time": datetime(2025, 10, 26, 14, 0, tzinfo=timezone.utc),
        "end_time": datetime(2025, 10, 26, 15, 0, tzinfo=timezone.utc),
        "location": "Conference Room A",
        "description": "Quarterly planning meeting",
    }
    values.update(overrides)
    return CalendarEvent(**values)


@pytest.fixture(autouse=True)
def _fresh_registry(monkeypatch):
    monkeypatch.delenv("WELLKNOWN_PLATFORMS_FILE", raising=False)
    monkeypatch.delenv("WELLKNOWN_DEFAULT_PLATFORM", raising=False)
    default_registry.cache_clear()
    yield
    default_registry.cache_clear()
