"""Apple Calendar support via downloadable iCalendar (.ics) documents."""

from __future__ import annotations

import base64
from datetime import date, datetime, timedelta, timezone
from typing import Optional
from urllib.parse import quote
from uuid import NAMESPACE_URL, uuid5

from icalendar import Alarm, Calendar, Event, vCalAddress, vText

from .constants import (
    ICS_CALENDAR_SCALE,
    ICS_DEFAULT_STATUS,
    ICS_DOWNLOAD_PATH,
    ICS_METHOD,
    ICS_PROD_ID,
    ICS_REMINDER_DESCRIPTION,
    ICS_UID_DOMAIN,
    ICS_VERSION,
)
from .event import Attendee, CalendarEvent, Organizer, as_utc
from .validators import validate_ics_fields


def _event_times(event: CalendarEvent) -> tuple[date | datetime, date | datetime]:
    if event.all_day:
        # All-day events keep the calendar date the caller wrote, in its own zone.
        start = event.start_time.date()
        end = event.end_time.date()
        # DTEND is exclusive for VALUE=DATE.
        return start, max(end, start) + timedelta(days=1)
    return as_utc(event.start_time, "start_time"), as_utc(event.end_time, "end_time")


def event_uid(event: CalendarEvent) -> str:
    start, end = _event_times(event)
    fingerprint = "\x1f".join(
        [
            event.title,
            start.isoformat(),
            end.isoformat(),
            event.location,
            event.description,
        ]
    )
    return f"{uuid5(NAMESPACE_URL, fingerprint)}@{ICS_UID_DOMAIN}"


def _address(email: str, name: str, **params: str) -> vCalAddress:
    address = vCalAddress(f"mailto:{email}")
    if name:
        address.params["cn"] = vText(name)
    for key, value in params.items():
        address.params[key] = vText(value)
    return address


def _organizer(organizer: Organizer) -> vCalAddress:
    return _address(organizer.email, organizer.name)


def _attendee(attendee: Attendee) -> vCalAddress:
    role = "REQ-PARTICIPANT" if attendee.required else "OPT-PARTICIPANT"
    return _address(attendee.email, attendee.name, role=role, rsvp="TRUE")


def _reminder(minutes: int) -> Alarm:
    alarm = Alarm()
    alarm.add("action", "DISPLAY")
    alarm.add("description", ICS_REMINDER_DESCRIPTION)
    alarm.add("trigger", timedelta(minutes=-minutes))
    return alarm


def build_ics(event: CalendarEvent, stamp: Optional[datetime] = None) -> bytes:
    """Render ``event`` as a single-event calendar.

    Like :func:`~wellknown.calendar.urls.build_url`, the event is expected to
    be validated already. Status, priority and reminders are still checked
    since only this output uses them.
    """
    validate_ics_fields(event)
    start, end = _event_times(event)

    calendar = Calendar()
    calendar.add("prodid", ICS_PROD_ID)
    calendar.add("version", ICS_VERSION)
    calendar.add("calscale", ICS_CALENDAR_SCALE)
    calendar.add("method", ICS_METHOD)

    component = Event()
    component.add("uid", event_uid(event))
    component.add("dtstamp", as_utc(stamp) if stamp else datetime.now(tz=timezone.utc))
    component.add("dtstart", start)
    component.add("dtend", end)
    component.add("summary", event.title)
    if event.location:
        component.add("location", event.location)
    if event.description:
        component.add("description", event.description)
    if event.url:
        component.add("url", event.url)
    component.add("status", event.status or ICS_DEFAULT_STATUS)
    if event.priority:
        component.add("priority", event.priority)
    if event.categories:
        component.add("categories", list(event.categories))
    if event.organizer is not None:
        component.add("organizer", _organizer(event.organizer))
    for attendee in event.attendees:
        component.add("attendee", _attendee(attendee))
    for minutes in event.reminders:
        component.add_component(_reminder(minutes))

    calendar.add_component(component)
    return calendar.to_ical()


def build_data_uri(event: CalendarEvent, stamp: Optional[datetime] = None) -> str:
    encoded = base64.standard_b64encode(build_ics(event, stamp=stamp)).decode("ascii")
    return f"data:text/calendar;base64,{encoded}"


def build_download_url(
    event: CalendarEvent,
    stamp: Optional[datetime] = None,
    path: str = ICS_DOWNLOAD_PATH,
) -> str:
    """Return a download link carrying the .ics body in its ``event`` parameter.

    Safari on iOS does not open ``data:text/calendar`` URIs, so Apple devices
    need a real download.
    """
    encoded = base64.urlsafe_b64encode(build_ics(event, stamp=stamp)).decode("ascii")
    return f"{path}?event={quote(encoded, safe='')}"
