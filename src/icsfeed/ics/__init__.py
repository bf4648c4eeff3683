"""iCalendar text parsing."""

from .datetimes import parse_datetime
from .errors import ICSError, ICSInvalidEnvelopeError, ICSMalformedDateTimeError, format_error_for_user
from .models import Calendar, Event, ICSDateTime, Token
from .parser import EventAssembler, apply_token, parse_calendar
from .tokenizer import parse_token, unfold_lines

__all__ = [
    "Calendar",
    "Event",
    "ICSDateTime",
    "Token",
    "EventAssembler",
    "apply_token",
    "parse_calendar",
    "parse_datetime",
    "parse_token",
    "unfold_lines",
    "ICSError",
    "ICSInvalidEnvelopeError",
    "ICSMalformedDateTimeError",
    "format_error_for_user",
]
