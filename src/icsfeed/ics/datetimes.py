"""DTSTART/DTEND value normalization."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from .constants import DATE_RE, DATETIME_RE, PARAM_TZID, PARAM_VALUE, VALUE_DATE
from .errors import ICSMalformedDateTimeError
from .models import ICSDateTime, Token


def parse_datetime(token: Token) -> ICSDateTime:
    timezone_id = token.parameters.get(PARAM_TZID) or None

    if token.parameters.get(PARAM_VALUE) == VALUE_DATE:
        match = DATE_RE.match(token.value)
        if not match:
            raise ICSMalformedDateTimeError(
                f"{token.key} value '{token.value}' is not a DATE (YYYYMMDD)",
                key=token.key,
                value=token.value,
            )
        timestamp = _build_timestamp(token, match.groups())
        return ICSDateTime(timestamp=timestamp, timezone_id=timezone_id, only_date=True)

    match = DATETIME_RE.match(token.value)
    if not match:
        raise ICSMalformedDateTimeError(
            f"{token.key} value '{token.value}' is not a DATE-TIME (YYYYMMDDTHHMMSS[Z])",
            key=token.key,
            value=token.value,
        )
    *components, utc_marker = match.groups()
    timestamp = _build_timestamp(token, components)
    if utc_marker:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return ICSDateTime(timestamp=timestamp, timezone_id=timezone_id, only_date=False)


def _build_timestamp(token: Token, components: Iterable[str]) -> datetime:
    try:
        return datetime(*(int(part) for part in components))
    except ValueError as exc:
        raise ICSMalformedDateTimeError(
            f"{token.key} value '{token.value}' is out of range",
            key=token.key,
            value=token.value,
        ) from exc
