"""CLI entry point for icsfeed."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from icsfeed import __version__
from icsfeed.feed import FeedClient, fetch_calendar, load_config
from icsfeed.feed import format_error_for_user as format_feed_error
from icsfeed.ics import Calendar, Event, ICSDateTime, ICSError, parse_calendar
from icsfeed.ics import format_error_for_user as format_ics_error

app = typer.Typer(help="Parse iCalendar (.ics) feeds into events.")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"icsfeed version {__version__}")
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
    """Parse iCalendar feeds."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _format_error(error: Exception) -> str:
    if isinstance(error, ICSError):
        return format_ics_error(error)
    return format_feed_error(error)


def _format_datetime(value: ICSDateTime | None) -> str:
    if value is None:
        return "-"
    if value.only_date:
        text = value.date.isoformat()
    else:
        text = value.timestamp.isoformat()
    if value.timezone_id:
        text = f"{text} [{value.timezone_id}]"
    return text


def _format_event_compact(event: Event) -> str:
    return f"{event.uid or '-'} | {_format_datetime(event.start)} -> {_format_datetime(event.end)} | {event.summary or ''}"


def _echo_calendar(calendar: Calendar, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(calendar.to_dict(), indent=2, ensure_ascii=False))
        return

    if not calendar.events:
        typer.echo(f"No events found in {calendar.name}.")
        return

    for event in calendar.events:
        typer.echo(_format_event_compact(event))
    typer.echo(f"Total: {len(calendar.events)} event(s)")


def _calendar_name(name: Optional[str]) -> str:
    return name or load_config().calendar_name


@app.command("parse")
def parse_file(
    file: Path = typer.Argument(..., help="Path to an .ics file."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Calendar name (defaults to ICSFEED_CALENDAR_NAME)."),
    as_json: bool = typer.Option(False, "--json", help="Print the calendar as JSON."),
):
    """Parse a local .ics file."""
    try:
        calendar = fetch_calendar(_calendar_name(name), file)
    except Exception as exc:
        typer.secho(_format_error(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_calendar(calendar, as_json)


@app.command("fetch")
def fetch_url(
    url: str = typer.Argument(..., help="HTTP(S) URL of the calendar feed."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Calendar name (defaults to ICSFEED_CALENDAR_NAME)."),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Override ICSFEED_TIMEOUT for this request (seconds).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the calendar as JSON."),
):
    """Download and parse a calendar feed."""
    try:
        text = FeedClient(timeout=timeout).get_text(url)
        calendar = parse_calendar(_calendar_name(name), text)
    except Exception as exc:
        typer.secho(_format_error(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _echo_calendar(calendar, as_json)


def cli():
    """Entry point for the CLI."""
    app()
