"""CLI entry point for wellknown."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer

from wellknown import __version__
from wellknown.calendar import (
    InvalidFieldError,
    build_data_uri,
    build_ics,
    default_registry,
    format_error_for_user,
    generate_url,
    load_config,
    load_platforms_file,
    parse_event_data,
    validate,
    validate_platform_id,
)

app = typer.Typer()
calendar_app = typer.Typer(help="Calendar deep link tools")
app.add_typer(calendar_app, name="calendar")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"wellknown version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
):
    """Generate deep links for well-known apps."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _event_from_options(data: dict, tz: Optional[str]):
    tzinfo = None
    if tz:
        try:
            tzinfo = ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidFieldError(
                "Invalid timezone. Use an IANA name like America/Los_Angeles or UTC.",
                field="tz",
                value=tz,
            ) from exc
    event = parse_event_data(data, tz=tzinfo)
    validate(event)
    return event


@calendar_app.command("url")
def calendar_url(
    title: str = typer.Option(..., "--title", "-t", help="Event title."),
    start: str = typer.Option(..., "--start", help="Event start (YYYY-MM-DDTHH:MM or ISO 8601)."),
    end: str = typer.Option(..., "--end", help="Event end (YYYY-MM-DDTHH:MM or ISO 8601)."),
    location: Optional[str] = typer.Option(None, "--location", help="Event location."),
    description: Optional[str] = typer.Option(None, "--description", help="Event description."),
    platform: Optional[str] = typer.Option(
        None,
        "--platform",
        "-p",
        help="Target platform id (defaults to WELLKNOWN_DEFAULT_PLATFORM or google-calendar).",
    ),
    tz: Optional[str] = typer.Option(
        None,
        "--tz",
        help="Timezone for times without an offset (IANA name, defaults to UTC).",
    ),
):
    """Print a deep link URL for a calendar event."""
    try:
        platform_id = validate_platform_id(platform or load_config().default_platform)
        event = _event_from_options(
            {"title": title, "start": start, "end": end, "location": location, "description": description},
            tz,
        )
        url = generate_url(event, platform_id)
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(url)


@calendar_app.command("ics")
def calendar_ics(
    title: str = typer.Option(..., "--title", "-t", help="Event title."),
    start: str = typer.Option(..., "--start", help="Event start (YYYY-MM-DDTHH:MM, YYYY-MM-DD or ISO 8601)."),
    end: str = typer.Option(..., "--end", help="Event end (YYYY-MM-DDTHH:MM, YYYY-MM-DD or ISO 8601)."),
    location: Optional[str] = typer.Option(None, "--location", help="Event location."),
    description: Optional[str] = typer.Option(None, "--description", help="Event description."),
    all_day: bool = typer.Option(False, "--all-day", help="All-day event; the end date is inclusive."),
    status: Optional[str] = typer.Option(None, "--status", help="CONFIRMED, TENTATIVE or CANCELLED."),
    priority: Optional[int] = typer.Option(None, "--priority", help="Priority 0-9 (0 means undefined)."),
    url: Optional[str] = typer.Option(None, "--url", help="Link attached to the event."),
    categories: Optional[list[str]] = typer.Option(None, "--category", help="Category (repeatable)."),
    organizer: Optional[str] = typer.Option(None, "--organizer", help="Organizer email."),
    attendees: Optional[list[str]] = typer.Option(None, "--attendee", help="Attendee email (repeatable)."),
    reminders: Optional[list[int]] = typer.Option(
        None,
        "--reminder",
        help="Minutes before the start to show a reminder (repeatable).",
    ),
    data_uri: bool = typer.Option(False, "--data-uri", help="Print a data: URI instead of raw ICS."),
    tz: Optional[str] = typer.Option(
        None,
        "--tz",
        help="Timezone for times without an offset (IANA name, defaults to UTC).",
    ),
):
    """Print an Apple Calendar (.ics) document for a calendar event."""
    data = {
        "title": title,
        "start": start,
        "end": end,
        "location": location,
        "description": description,
        "allDay": all_day,
        "status": status,
        "priority": priority,
        "url": url,
        "categories": categories or [],
        "organizer": organizer,
        "attendees": attendees or [],
        "reminders": reminders or [],
    }
    try:
        event = _event_from_options(data, tz)
        output = build_data_uri(event) if data_uri else build_ics(event).decode("utf-8")
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(output)


@calendar_app.command("platforms")
def calendar_platforms(
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Only list platforms defined in this YAML file.",
    ),
):
    """List the platforms deep links can be generated for."""
    try:
        if file:
            configs = load_platforms_file(Path(file))
        else:
            configs = list(default_registry())
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for config in configs:
        typer.echo(f"{config.platform_id} | {config.base_url}")
    typer.echo(f"Total: {len(configs)} platform(s)")


def cli():
    """Entry point for the CLI."""
    app()
