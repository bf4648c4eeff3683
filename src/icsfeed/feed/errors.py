"""Error types for calendar feed loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class FeedError(Exception):
    message: str
    code: str = "FEED_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class FeedConfigError(FeedError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class FeedFileError(FeedError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, code="FILE_ERROR", details={"path": path})
        self.path = path


class FeedURLError(FeedError):
    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, code="URL_ERROR", details={"url": url})
        self.url = url


class FeedHTTPError(FeedError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, code="HTTP_ERROR", details={"status_code": status_code})
        self.status_code = status_code


class FeedNetworkError(FeedError):
    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, code="NETWORK_ERROR", details={"original_error": str(original_error) if original_error else None})
        self.original_error = original_error


class FeedTimeoutError(FeedError):
    def __init__(self, message: str, timeout: float | None = None) -> None:
        super().__init__(message, code="TIMEOUT_ERROR", details={"timeout": timeout})
        self.timeout = timeout


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, FeedConfigError):
        return f"Configuration Error: {error.message}"
    if isinstance(error, FeedFileError):
        return f"File Error: {error.message}"
    if isinstance(error, FeedURLError):
        return f"URL Error: {error.message}"
    if isinstance(error, FeedHTTPError):
        return f"HTTP Error: {error.message}"
    if isinstance(error, FeedNetworkError):
        return f"Network Error: {error.message}"
    if isinstance(error, FeedTimeoutError):
        return f"Timeout Error: {error.message}"
    if isinstance(error, FeedError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
