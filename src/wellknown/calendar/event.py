"""Platform-agnostic calendar event model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .errors import (
    InvalidFieldError,
    InvalidTimeRangeError,
    MissingEndTimeError,
    MissingStartTimeError,
    MissingTitleError,
)


@dataclass(frozen=True)
class Organizer:
    email: str
    name: str = ""


@dataclass(frozen=True)
class Attendee:
    email: str
    name: str = ""
    required: bool = False


@dataclass(frozen=True)
class CalendarEvent:
    """A calendar event that can be turned into a platform deep link.

    ``start_time`` and ``end_time`` should be timezone-aware; naive values are
    read as UTC. ``None`` marks an unset timestamp.

    The fields after ``description`` only appear in .ics output; deep link
    URLs carry the basic fields alone. For ``all_day`` events the end date is
    inclusive.
    """

    title: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: str = ""
    description: str = ""
    all_day: bool = False
    status: str = ""
    priority: int = 0
    url: str = ""
    categories: tuple[str, ...] = ()
    organizer: Optional[Organizer] = None
    attendees: tuple[Attendee, ...] = ()
    reminders: tuple[int, ...] = ()

    def validate(self) -> None:
        validate(self)

    def optional_value(self, field: str) -> str:
        return getattr(self, field, "") or ""


def as_utc(value: datetime, field: Optional[str] = None) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise InvalidFieldError(
            "Date/time is outside the range that can be rendered in UTC",
            field=field,
            value=value.isoformat(),
        ) from exc


def _instant(value: datetime) -> datetime:
    # Aware datetimes compare as instants; only naive ones need a zone.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate(event: CalendarEvent) -> None:
    """Raise the first validation error found on ``event``.

    Checks run in a fixed order: title, start time, end time, then the range.
    """
    if not event.title:
        raise MissingTitleError()
    if event.start_time is None:
        raise MissingStartTimeError()
    if event.end_time is None:
        raise MissingEndTimeError()
    if _instant(event.end_time) < _instant(event.start_time):
        raise InvalidTimeRangeError(value=event.end_time.isoformat())
