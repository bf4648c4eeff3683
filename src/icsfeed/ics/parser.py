"""Calendar state machine and VEVENT assembly."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from .constants import (
    BEGIN,
    DESCRIPTION,
    DTEND,
    DTSTART,
    END,
    ENVELOPE_RE,
    LOCATION,
    SUMMARY,
    UID,
    URL,
    VEVENT,
)
from .datetimes import parse_datetime
from .errors import ICSInvalidEnvelopeError
from .models import Calendar, Event, Token
from .tokenizer import parse_token, unfold_lines

logger = logging.getLogger(__name__)


def _raw_value(token: Token) -> str:
    return token.value


# property key -> (Event field, value converter)
EVENT_FIELDS: dict[str, tuple[str, Callable[[Token], object]]] = {
    UID: ("uid", _raw_value),
    SUMMARY: ("summary", _raw_value),
    DESCRIPTION: ("description", _raw_value),
    URL: ("url", _raw_value),
    LOCATION: ("location", _raw_value),
    DTSTART: ("start", parse_datetime),
    DTEND: ("end", parse_datetime),
}


def apply_token(event: Event, token: Token) -> Event:
    """Return ``event`` updated with ``token``; unknown keys leave it unchanged."""
    target = EVENT_FIELDS.get(token.key)
    if target is None:
        return event
    field_name, convert = target
    return replace(event, **{field_name: convert(token)})


class EventAssembler:
    """Collects the properties of one open VEVENT block."""

    def __init__(self) -> None:
        self.event = Event()

    def apply_token(self, token: Token) -> None:
        self.event = apply_token(self.event, token)


def parse_calendar(name: str, raw: str) -> Calendar:
    text = raw.strip()
    if not ENVELOPE_RE.match(text):
        raise ICSInvalidEnvelopeError("Calendar must start with BEGIN:VCALENDAR and end with END:VCALENDAR")

    events: list[Event] = []
    assembler: Optional[EventAssembler] = None

    for line in unfold_lines(text):
        token = parse_token(line)
        if assembler is None:
            if token.key == BEGIN and token.value == VEVENT:
                assembler = EventAssembler()
            continue
        if token.key == END and token.value == VEVENT:
            events.append(assembler.event)
            assembler = None
            continue
        assembler.apply_token(token)

    if assembler is not None:
        logger.debug("Dropping unterminated VEVENT in calendar %r (uid=%r)", name, assembler.event.uid)

    logger.debug("Parsed calendar %r with %d event(s)", name, len(events))
    return Calendar(name=name, events=tuple(events))
