"""Error types for iCalendar parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ICSError(Exception):
    message: str
    code: str = "ICS_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ICSInvalidEnvelopeError(ICSError):
    def __init__(self, message: str = "Invalid calendar envelope") -> None:
        super().__init__(message, code="INVALID_ENVELOPE")


class ICSMalformedDateTimeError(ICSError):
    def __init__(self, message: str, key: str | None = None, value: str | None = None) -> None:
        super().__init__(message, code="MALFORMED_DATETIME", details={"key": key, "value": value})
        self.key = key
        self.value = value


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, ICSInvalidEnvelopeError):
        return f"Invalid Calendar: {error.message}"
    if isinstance(error, ICSMalformedDateTimeError):
        return f"Invalid Date: {error.message}"
    if isinstance(error, ICSError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
