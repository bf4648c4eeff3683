"""Parse iCalendar feeds into structured events."""

__version__ = "0.1.0"
