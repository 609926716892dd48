"""Parsing helpers for raw calendar form data."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Any, Mapping, Optional

from .constants import (
    DATETIME_LOCAL_FORMAT,
    FIELD_ALL_DAY,
    FIELD_ATTENDEES,
    FIELD_CATEGORIES,
    FIELD_DESCRIPTION,
    FIELD_END,
    FIELD_LOCATION,
    FIELD_ORGANIZER,
    FIELD_PRIORITY,
    FIELD_REMINDERS,
    FIELD_START,
    FIELD_STATUS,
    FIELD_TITLE,
    FIELD_URL,
    ICS_PRIORITY_RANGE,
    ICS_STATUSES,
)
from .errors import InvalidFieldError, UnknownPlatformError
from .event import Attendee, CalendarEvent, Organizer


def _string_field(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidFieldError(f"{field} must be a string", field=field, value=value)
    return value.strip()


def _list_field(data: Mapping[str, Any], field: str) -> list[Any]:
    value = data.get(field)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidFieldError(f"{field} must be a list", field=field, value=value)
    return list(value)


def parse_event_datetime(value: str, field: str, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse a datetime-local or ISO 8601 value. Empty input returns None.

    Naive values are placed in ``tz`` (UTC when omitted). A bare date
    (``YYYY-MM-DD``) is read as midnight.
    """
    if not value:
        return None
    try:
        parsed = datetime.strptime(value, DATETIME_LOCAL_FORMAT)
    except ValueError:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidFieldError(
                "Invalid datetime format. Use YYYY-MM-DDTHH:MM or ISO 8601 (e.g. 2025-10-26T14:00:00Z)",
                field=field,
                value=value,
            ) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz or timezone.utc)
    return parsed


def validate_status(value: str) -> str:
    status = (value or "").strip().upper()
    if status and status not in ICS_STATUSES:
        raise InvalidFieldError(
            f"Invalid status. Allowed: {', '.join(ICS_STATUSES)}",
            field=FIELD_STATUS,
            value=value,
        )
    return status


def validate_priority(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError("priority must be an integer", field=FIELD_PRIORITY, value=value)
    low, high = ICS_PRIORITY_RANGE
    if value < low or value > high:
        raise InvalidFieldError(f"priority must be {low}-{high}", field=FIELD_PRIORITY, value=value)
    return value


def validate_reminder(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidFieldError(
            "reminders must be whole minutes before the start (>= 0)",
            field=FIELD_REMINDERS,
            value=value,
        )
    return value


def _parse_address(value: Any, field: str) -> tuple[str, str]:
    if isinstance(value, str):
        email, name = value, ""
    elif isinstance(value, Mapping):
        email = value.get("email") or ""
        name = value.get("name") or ""
        if not isinstance(email, str) or not isinstance(name, str):
            raise InvalidFieldError(f"{field} email and name must be strings", field=field, value=value)
    else:
        raise InvalidFieldError(f"{field} must be an email or an object with an email", field=field, value=value)
    email = email.strip()
    if "@" not in email:
        raise InvalidFieldError(f"{field} needs a valid email address", field=field, value=value)
    return email, name.strip()


def _parse_organizer(data: Mapping[str, Any]) -> Optional[Organizer]:
    value = data.get(FIELD_ORGANIZER)
    if value is None or value == "":
        return None
    email, name = _parse_address(value, FIELD_ORGANIZER)
    return Organizer(email=email, name=name)


def _parse_attendees(data: Mapping[str, Any]) -> tuple[Attendee, ...]:
    attendees = []
    for item in _list_field(data, FIELD_ATTENDEES):
        email, name = _parse_address(item, FIELD_ATTENDEES)
        required = item.get("required", False) if isinstance(item, Mapping) else False
        attendees.append(Attendee(email=email, name=name, required=bool(required)))
    return tuple(attendees)


def _parse_categories(data: Mapping[str, Any]) -> tuple[str, ...]:
    value = data.get(FIELD_CATEGORIES)
    if isinstance(value, str):
        items: list[Any] = value.split(",")
    else:
        items = _list_field(data, FIELD_CATEGORIES)
    categories = []
    for item in items:
        if not isinstance(item, str):
            raise InvalidFieldError("categories must be strings", field=FIELD_CATEGORIES, value=item)
        if item.strip():
            categories.append(item.strip())
    return tuple(categories)


def _parse_all_day(data: Mapping[str, Any]) -> bool:
    value = data.get(FIELD_ALL_DAY, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidFieldError(f"{FIELD_ALL_DAY} must be true or false", field=FIELD_ALL_DAY, value=value)
    return value


def parse_event_data(data: Mapping[str, Any], tz: Optional[tzinfo] = None) -> CalendarEvent:
    """Build a :class:`CalendarEvent` from schema-shaped form data.

    Missing required values are left unset so that
    :func:`~wellknown.calendar.event.validate` reports them.
    """
    start = _string_field(data, FIELD_START)
    end = _string_field(data, FIELD_END)
    return CalendarEvent(
        title=_string_field(data, FIELD_TITLE),
        start_time=parse_event_datetime(start, FIELD_START, tz=tz),
        end_time=parse_event_datetime(end, FIELD_END, tz=tz),
        location=_string_field(data, FIELD_LOCATION),
        description=_string_field(data, FIELD_DESCRIPTION),
        all_day=_parse_all_day(data),
        status=validate_status(_string_field(data, FIELD_STATUS)),
        priority=validate_priority(data.get(FIELD_PRIORITY)),
        url=_string_field(data, FIELD_URL),
        categories=_parse_categories(data),
        organizer=_parse_organizer(data),
        attendees=_parse_attendees(data),
        reminders=tuple(validate_reminder(item) for item in _list_field(data, FIELD_REMINDERS)),
    )


def validate_ics_fields(event: CalendarEvent) -> None:
    """Check the fields only .ics output uses."""
    validate_status(event.status)
    validate_priority(event.priority)
    for minutes in event.reminders:
        validate_reminder(minutes)


def validate_platform_id(value: Optional[str]) -> str:
    platform_id = (value or "").strip().lower()
    if not platform_id:
        raise UnknownPlatformError(value)
    return platform_id
