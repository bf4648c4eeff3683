"""Constants for the iCalendar parser."""

from __future__ import annotations

import re

BEGIN = "BEGIN"
END = "END"
VEVENT = "VEVENT"

UID = "UID"
SUMMARY = "SUMMARY"
DESCRIPTION = "DESCRIPTION"
URL = "URL"
LOCATION = "LOCATION"
DTSTART = "DTSTART"
DTEND = "DTEND"

PARAM_TZID = "TZID"
PARAM_VALUE = "VALUE"
VALUE_DATE = "DATE"

ENVELOPE_RE = re.compile(r"^BEGIN:VCALENDAR.*END:VCALENDAR$", re.DOTALL)
LINE_BREAK_RE = re.compile(r"\r?\n")
DATE_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})", re.ASCII)
DATETIME_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})(Z)?", re.ASCII)
