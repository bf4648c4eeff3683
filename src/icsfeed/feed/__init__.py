"""Calendar feed loading."""

from .client import FeedClient, fetch_calendar, is_url, load_calendar_text, read_calendar_file
from .config import FeedConfig, load_config
from .errors import (
    FeedConfigError,
    FeedError,
    FeedFileError,
    FeedHTTPError,
    FeedNetworkError,
    FeedTimeoutError,
    FeedURLError,
    format_error_for_user,
)

__all__ = [
    "FeedClient",
    "fetch_calendar",
    "is_url",
    "load_calendar_text",
    "read_calendar_file",
    "FeedConfig",
    "load_config",
    "FeedConfigError",
    "FeedError",
    "FeedFileError",
    "FeedHTTPError",
    "FeedNetworkError",
    "FeedTimeoutError",
    "FeedURLError",
    "format_error_for_user",
]
