"""Constants for loading calendar feeds."""

from __future__ import annotations

DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_CALENDAR_NAME = "calendar"

DEFAULT_HEADERS = {
    "Accept": "text/calendar, text/plain;q=0.9, */*;q=0.1",
    "User-Agent": "icsfeed",
}

URL_SCHEMES = ("http://", "https://")
