"""Constants for calendar deep link generation."""

from __future__ import annotations

FIELD_TITLE = "title"
FIELD_START = "start"
FIELD_END = "end"
FIELD_DATES = "dates"
FIELD_LOCATION = "location"
FIELD_DESCRIPTION = "description"
FIELD_ALL_DAY = "allDay"
FIELD_STATUS = "status"
FIELD_PRIORITY = "priority"
FIELD_URL = "url"
FIELD_CATEGORIES = "categories"
FIELD_ORGANIZER = "organizer"
FIELD_ATTENDEES = "attendees"
FIELD_REMINDERS = "reminders"

OPTIONAL_EVENT_FIELDS = (FIELD_LOCATION, FIELD_DESCRIPTION)

QUERY_PARAM_ACTION = "action"
DATE_RANGE_SEPARATOR = "/"

GOOGLE_CALENDAR_ID = "google-calendar"
GOOGLE_CALENDAR = {
    "base_url": "https://calendar.google.com/calendar/render",
    "action_param": "TEMPLATE",
    "time_format": "%Y%m%dT%H%M%SZ",
    "field_mapping": {
        FIELD_TITLE: "text",
        FIELD_DATES: "dates",
        FIELD_LOCATION: "location",
        FIELD_DESCRIPTION: "details",
    },
    "optional_fields": [FIELD_LOCATION, FIELD_DESCRIPTION],
}

DEFAULT_PLATFORM_ID = GOOGLE_CALENDAR_ID

# HTML datetime-local input format, as submitted by web forms.
DATETIME_LOCAL_FORMAT = "%Y-%m-%dT%H:%M"

ICS_PROD_ID = "-//wellknown//Calendar//EN"
ICS_VERSION = "2.0"
ICS_CALENDAR_SCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
ICS_DOWNLOAD_PATH = "/apple/calendar/download"
ICS_UID_DOMAIN = "wellknown"
ICS_DEFAULT_STATUS = "CONFIRMED"
ICS_STATUSES = ("CONFIRMED", "TENTATIVE", "CANCELLED")
# RFC 5545 PRIORITY: 0 is undefined, 1 highest, 9 lowest.
ICS_PRIORITY_RANGE = (0, 9)
ICS_REMINDER_DESCRIPTION = "Reminder"
