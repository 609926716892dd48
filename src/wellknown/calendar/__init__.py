"""Calendar event validation and deep link generation."""

from .config import CalendarConfig, default_registry, load_config, load_platforms_file, lookup
from .errors import (
    CalendarError,
    CalendarValidationError,
    ErrorKind,
    InvalidFieldError,
    InvalidTimeRangeError,
    MissingEndTimeError,
    MissingStartTimeError,
    MissingTitleError,
    PlatformConfigError,
    UnknownPlatformError,
    format_error_for_user,
    is_client_error,
)
from .event import Attendee, CalendarEvent, Organizer, validate
from .ics import build_data_uri, build_download_url, build_ics
from .platforms import BUILTIN_PLATFORMS, BUILTIN_REGISTRY, PlatformConfig, PlatformRegistry
from .urls import build_url, format_time, generate_url, same_url
from .validators import (
    parse_event_data,
    parse_event_datetime,
    validate_ics_fields,
    validate_platform_id,
    validate_priority,
    validate_status,
)

__all__ = [
    "CalendarConfig",
    "default_registry",
    "load_config",
    "load_platforms_file",
    "lookup",
    "CalendarError",
    "CalendarValidationError",
    "ErrorKind",
    "InvalidFieldError",
    "InvalidTimeRangeError",
    "MissingEndTimeError",
    "MissingStartTimeError",
    "MissingTitleError",
    "PlatformConfigError",
    "UnknownPlatformError",
    "format_error_for_user",
    "is_client_error",
    "Attendee",
    "CalendarEvent",
    "Organizer",
    "validate",
    "build_data_uri",
    "build_download_url",
    "build_ics",
    "BUILTIN_PLATFORMS",
    "BUILTIN_REGISTRY",
    "PlatformConfig",
    "PlatformRegistry",
    "build_url",
    "format_time",
    "generate_url",
    "same_url",
    "parse_event_data",
    "parse_event_datetime",
    "validate_ics_fields",
    "validate_platform_id",
    "validate_priority",
    "validate_status",
]
