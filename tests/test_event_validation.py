from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from conftest import make_event
from wellknown.calendar import (
    ErrorKind,
    InvalidTimeRangeError,
    MissingEndTimeError,
    MissingStartTimeError,
    MissingTitleError,
    validate,
)


def test_complete_event_is_valid():
    assert validate(make_event()) is None


def test_optional_fields_may_be_empty():
    assert validate(make_event(location="", description="")) is None


def test_missing_title():
    with pytest.raises(MissingTitleError) as excinfo:
        validate(make_event(title=""))

    assert excinfo.value.kind is ErrorKind.MISSING_TITLE
    assert excinfo.value.message == "calendar event title is required"


def test_missing_start_time():
    with pytest.raises(MissingStartTimeError) as excinfo:
        validate(make_event(start_time=None))

    assert excinfo.value.kind is ErrorKind.MISSING_START_TIME


def test_missing_end_time():
    with pytest.raises(MissingEndTimeError) as excinfo:
        validate(make_event(end_time=None))

    assert excinfo.value.kind is ErrorKind.MISSING_END_TIME


def test_title_is_checked_before_start_time():
    with pytest.raises(MissingTitleError):
        validate(make_event(title="", start_time=None))


def test_start_time_is_checked_before_end_time():
    with pytest.raises(MissingStartTimeError):
        validate(make_event(start_time=None, end_time=None))


def test_end_before_start_is_invalid_range():
    event = make_event(
        start_time=datetime(2025, 10, 26, 15, 0, tzinfo=timezone.utc),
        end_time=datetime(2025, 10, 26, 14, 0, tzinfo=timezone.utc),
    )

    with pytest.raises(InvalidTimeRangeError) as excinfo:
        event.validate()

    assert excinfo.value.kind is ErrorKind.INVALID_TIME_RANGE
    assert excinfo.value.field == "end_time"


def test_zero_length_event_is_valid():
    start = datetime(2025, 10, 26, 14, 0, tzinfo=timezone.utc)

    assert validate(make_event(start_time=start, end_time=start)) is None


def test_range_is_compared_as_instants_across_offsets():
    # 14:30 in Berlin (CET) is 13:30 UTC.
    event = make_event(
        start_time=datetime(2025, 10, 26, 14, 0, tzinfo=timezone.utc),
        end_time=datetime(2025, 10, 26, 14, 30, tzinfo=ZoneInfo("Europe/Berlin")),
    )

    with pytest.raises(InvalidTimeRangeError):
        validate(event)


def test_naive_times_are_read_as_utc():
    event = make_event(
        start_time=datetime(2025, 10, 26, 14, 0),
        end_time=datetime(2025, 10, 26, 14, 0, tzinfo=timezone(timedelta(hours=1))),
    )

    with pytest.raises(InvalidTimeRangeError):
        validate(event)


def test_validate_does_not_modify_event():
    event = make_event()
    before = (event.title, event.start_time, event.end_time, event.location, event.description)

    validate(event)

    assert (event.title, event.start_time, event.end_time, event.location, event.description) == before


def test_validate_handles_times_before_utc_range():
    event = make_event(
        start_time=datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1))),
        end_time=datetime(1, 1, 1, 2, 0, tzinfo=timezone.utc),
    )

    assert validate(event) is None


def test_validate_detects_range_near_minimum_datetime():
    event = make_event(
        start_time=datetime(1, 1, 1, 2, 0, tzinfo=timezone.utc),
        end_time=datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=-1))),
    )

    with pytest.raises(InvalidTimeRangeError):
        validate(event)


def test_validate_handles_times_after_utc_range():
    event = make_event(
        start_time=datetime(9999, 12, 31, 22, 0, tzinfo=timezone.utc),
        end_time=datetime(9999, 12, 31, 23, 30, tzinfo=timezone(timedelta(hours=-1))),
    )

    assert validate(event) is None
