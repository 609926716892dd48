from typer.testing import CliRunner

from wellknown import __version__
from wellknown.cli import app

runner = CliRunner()

TEAM_MEETING_URL = (
    "https://calendar.google.com/calendar/render?action=TEMPLATE"
    "&dates=20251026T140000Z%2F20251026T150000Z"
    "&details=Quarterly+planning+meeting"
    "&location=Conference+Room+A"
    "&text=Team+Meeting"
)


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_calendar_url():
    result = runner.invoke(
        app,
        [
            "calendar",
            "url",
            "--title",
            "Team Meeting",
            "--start",
            "2025-10-26T14:00",
            "--end",
            "2025-10-26T15:00",
            "--location",
            "Conference Room A",
            "--description",
            "Quarterly planning meeting",
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == TEAM_MEETING_URL


def test_calendar_url_with_timezone():
    result = runner.invoke(
        app,
        ["calendar", "url", "-t", "Standup", "--start", "2025-07-01T16:00", "--end", "2025-07-01T16:15", "--tz", "Europe/Berlin"],
    )

    assert result.exit_code == 0
    assert "dates=20250701T140000Z%2F20250701T141500Z" in result.output


def test_calendar_url_invalid_range():
    result = runner.invoke(
        app,
        ["calendar", "url", "-t", "Backwards", "--start", "2025-10-26T15:00", "--end", "2025-10-26T14:00"],
    )

    assert result.exit_code == 1
    assert "Validation Error: calendar event end time must not be before start time" in result.output


def test_calendar_url_unknown_platform():
    result = runner.invoke(
        app,
        [
            "calendar",
            "url",
            "-t",
            "Standup",
            "--start",
            "2025-10-26T14:00",
            "--end",
            "2025-10-26T15:00",
            "--platform",
            "not-a-real-platform",
        ],
    )

    assert result.exit_code == 1
    assert "Platform Error" in result.output


def test_calendar_url_invalid_timezone():
    result = runner.invoke(
        app,
        ["calendar", "url", "-t", "Standup", "--start", "2025-10-26T14:00", "--end", "2025-10-26T15:00", "--tz", "Mars/Olympus"],
    )

    assert result.exit_code == 1
    assert "Invalid timezone" in result.output


def test_calendar_ics_data_uri():
    result = runner.invoke(
        app,
        ["calendar", "ics", "-t", "Standup", "--start", "2025-10-26T14:00", "--end", "2025-10-26T15:00", "--data-uri"],
    )

    assert result.exit_code == 0
    assert result.output.startswith("data:text/calendar;base64,")


def test_calendar_ics_raw():
    result = runner.invoke(
        app,
        ["calendar", "ics", "-t", "Standup", "--start", "2025-10-26T14:00", "--end", "2025-10-26T15:00"],
    )

    assert result.exit_code == 0
    assert "BEGIN:VCALENDAR" in result.output
    assert "SUMMARY:Standup" in result.output


def test_calendar_platforms():
    result = runner.invoke(app, ["calendar", "platforms"])

    assert result.exit_code == 0
    assert "google-calendar | https://calendar.google.com/calendar/render" in result.output
    assert "Total: 1 platform(s)" in result.output


def test_calendar_platforms_from_file(tmp_path):
    path = tmp_path / "platforms.yaml"
    path.write_text(
        "platforms:\n"
        "  example-calendar:\n"
        "    base_url: https://calendar.example.com/new\n"
        "    action_param: CREATE\n"
        "    time_format: '%Y%m%d'\n"
        "    field_mapping: {title: subject, dates: when}\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["calendar", "platforms", "--file", str(path)])

    assert result.exit_code == 0
    assert "example-calendar | https://calendar.example.com/new" in result.output


def test_calendar_url_mixed_case_platform_from_file(monkeypatch, tmp_path):
    path = tmp_path / "platforms.yaml"
    path.write_text(
        "platforms:\n"
        "  MyCal:\n"
        "    base_url: https://mycal.example.com/add\n"
        "    action_param: NEW\n"
        "    time_format: '%Y%m%dT%H%M%SZ'\n"
        "    field_mapping: {title: name, dates: when}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("WELLKNOWN_PLATFORMS_FILE", str(path))

    result = runner.invoke(
        app,
        ["calendar", "url", "-t", "Standup", "--start", "2025-10-26T14:00", "--end", "2025-10-26T15:00", "-p", "MyCal"],
    )

    assert result.exit_code == 0
    assert result.output.strip() == (
        "https://mycal.example.com/add?action=NEW&name=Standup&when=20251026T140000Z%2F20251026T150000Z"
    )


def test_calendar_ics_all_day():
    result = runner.invoke(
        app,
        ["calendar", "ics", "-t", "Offsite", "--start", "2025-10-26", "--end", "2025-10-27", "--all-day"],
    )

    assert result.exit_code == 0
    assert "DTSTART;VALUE=DATE:20251026" in result.output
    assert "DTEND;VALUE=DATE:20251028" in result.output


def test_calendar_ics_extra_fields():
    result = runner.invoke(
        app,
        [
            "calendar",
            "ics",
            "-t",
            "Standup",
            "--start",
            "2025-10-26T14:00",
            "--end",
            "2025-10-26T15:00",
            "--status",
            "tentative",
            "--priority",
            "5",
            "--category",
            "work",
            "--category",
            "daily",
            "--organizer",
            "lead@example.com",
            "--attendee",
            "dev@example.com",
            "--reminder",
            "10",
        ],
    )

    assert result.exit_code == 0
    assert "STATUS:TENTATIVE" in result.output
    assert "PRIORITY:5" in result.output
    assert "CATEGORIES:work,daily" in result.output
    assert "mailto:lead@example.com" in result.output
    assert "mailto:dev@example.com" in result.output
    assert "BEGIN:VALARM" in result.output


def test_calendar_ics_invalid_priority():
    result = runner.invoke(
        app,
        ["calendar", "ics", "-t", "Standup", "--start", "2025-10-26T14:00", "--end", "2025-10-26T15:00", "--priority", "12"],
    )

    assert result.exit_code == 1
    assert "Validation Error: priority must be 0-9" in result.output
