"""In-memory calendar model produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Token:
    key: str
    value: str = ""
    # compared for equality, left out of the hash
    parameters: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class ICSDateTime:
    """A DTSTART/DTEND value.

    ``timestamp`` is naive for floating and TZID values (the TZID is kept in
    ``timezone_id`` but never resolved) and aware UTC for values ending in ``Z``.
    """

    timestamp: datetime
    timezone_id: Optional[str] = None
    only_date: bool = False

    @property
    def date(self) -> date:
        return self.timestamp.date()

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.date.isoformat() if self.only_date else self.timestamp.isoformat(),
            "timezone_id": self.timezone_id,
            "only_date": self.only_date,
        }


@dataclass(frozen=True)
class Event:
    uid: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    location: Optional[str] = None
    start: Optional[ICSDateTime] = None
    end: Optional[ICSDateTime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "uid": self.uid,
            "summary": self.summary,
            "description": self.description,
            "url": self.url,
            "location": self.location,
            "start": self.start.to_dict() if self.start else None,
            "end": self.end.to_dict() if self.end else None,
        }


@dataclass(frozen=True)
class Calendar:
    name: str
    events: tuple[Event, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "events": [event.to_dict() for event in self.events]}
