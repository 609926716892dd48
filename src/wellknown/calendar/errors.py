"""Error types for calendar deep link generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    MISSING_TITLE = "MISSING_TITLE"
    MISSING_START_TIME = "MISSING_START_TIME"
    MISSING_END_TIME = "MISSING_END_TIME"
    INVALID_TIME_RANGE = "INVALID_TIME_RANGE"
    UNKNOWN_PLATFORM = "UNKNOWN_PLATFORM"
    INVALID_FIELD = "INVALID_FIELD"
    PLATFORM_CONFIG_ERROR = "PLATFORM_CONFIG_ERROR"


@dataclass
class CalendarError(Exception):
    message: str
    code: str = "CALENDAR_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    @property
    def kind(self) -> ErrorKind | None:
        try:
            return ErrorKind(self.code)
        except ValueError:
            return None


class CalendarValidationError(CalendarError):
    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(message, code=code, details={"field": field, "value": value})
        self.field = field
        self.value = value


class MissingTitleError(CalendarValidationError):
    def __init__(self) -> None:
        super().__init__("calendar event title is required", field="title", code=ErrorKind.MISSING_TITLE.value)


class MissingStartTimeError(CalendarValidationError):
    def __init__(self) -> None:
        super().__init__(
            "calendar event start time is required",
            field="start_time",
            code=ErrorKind.MISSING_START_TIME.value,
        )


class MissingEndTimeError(CalendarValidationError):
    def __init__(self) -> None:
        super().__init__(
            "calendar event end time is required",
            field="end_time",
            code=ErrorKind.MISSING_END_TIME.value,
        )


class InvalidTimeRangeError(CalendarValidationError):
    def __init__(self, value: Any | None = None) -> None:
        super().__init__(
            "calendar event end time must not be before start time",
            field="end_time",
            value=value,
            code=ErrorKind.INVALID_TIME_RANGE.value,
        )


class InvalidFieldError(CalendarValidationError):
    def __init__(self, message: str, field: str | None = None, value: Any | None = None) -> None:
        super().__init__(message, field=field, value=value, code=ErrorKind.INVALID_FIELD.value)


class UnknownPlatformError(CalendarError):
    def __init__(self, platform_id: str | None) -> None:
        super().__init__(
            f"unknown platform '{platform_id}'",
            code=ErrorKind.UNKNOWN_PLATFORM.value,
            details={"platform_id": platform_id},
        )
        self.platform_id = platform_id


class PlatformConfigError(CalendarError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, code=ErrorKind.PLATFORM_CONFIG_ERROR.value, details={"path": path})
        self.path = path


_CLIENT_ERROR_KINDS = frozenset(
    {
        ErrorKind.MISSING_TITLE,
        ErrorKind.MISSING_START_TIME,
        ErrorKind.MISSING_END_TIME,
        ErrorKind.INVALID_TIME_RANGE,
        ErrorKind.UNKNOWN_PLATFORM,
        ErrorKind.INVALID_FIELD,
    }
)


def is_client_error(error: Exception) -> bool:
    """Return True when the error was caused by caller input."""
    if not isinstance(error, CalendarError):
        return False
    return error.kind in _CLIENT_ERROR_KINDS


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, CalendarValidationError):
        return f"Validation Error: {error.message}"
    if isinstance(error, UnknownPlatformError):
        return f"Platform Error: {error.message}"
    if isinstance(error, PlatformConfigError):
        return f"Configuration Error: {error.message}"
    if isinstance(error, CalendarError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
