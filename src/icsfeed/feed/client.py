"""Load raw calendar text from a file or an HTTP feed."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import requests

from icsfeed.ics import Calendar, parse_calendar

from .config import load_config
from .constants import DEFAULT_HEADERS, URL_SCHEMES
from .errors import FeedError, FeedFileError, FeedHTTPError, FeedNetworkError, FeedTimeoutError, FeedURLError

logger = logging.getLogger(__name__)


class FeedClient:
    def __init__(self, timeout: float | None = None) -> None:
        self.config = load_config()
        self.timeout = timeout or self.config.timeout_seconds
        self.retry_attempts = max(1, self.config.retry_attempts)
        self.retry_delay = max(0.0, self.config.retry_delay_seconds)

    def get_text(self, url: str) -> str:
        if not is_url(url):
            raise FeedURLError("Feed URL must start with http:// or https://", url=url)

        last_error: FeedError | None = None

        for attempt in range(1, self.retry_attempts + 1):
            logger.info("Fetching calendar feed %s (attempt %d/%d)", url, attempt, self.retry_attempts)
            try:
                response = requests.get(url, headers=DEFAULT_HEADERS, timeout=self.timeout)
            except requests.Timeout as exc:
                last_error = FeedTimeoutError("Request timeout", timeout=self.timeout)
                if not self._should_retry(last_error, attempt):
                    raise last_error from exc
                self._wait(last_error, attempt)
                continue
            except requests.RequestException as exc:
                last_error = FeedNetworkError("Network connection failed", exc)
                if not self._should_retry(last_error, attempt):
                    raise last_error from exc
                self._wait(last_error, attempt)
                continue

            if not response.ok:
                message = response.text.strip() or response.reason
                last_error = FeedHTTPError(f"Feed request failed ({response.status_code}): {message}", response.status_code)
                if not self._should_retry(last_error, attempt):
                    raise last_error
                self._wait(last_error, attempt)
                continue

            # ICS feeds are UTF-8 even when the server omits the charset
            if response.encoding is None or response.encoding.lower() == "iso-8859-1":
                response.encoding = "utf-8"
            return response.text.removeprefix("\ufeff")

        if last_error:
            raise last_error
        raise FeedError("Unknown error occurred")

    def _wait(self, error: FeedError, attempt: int) -> None:
        logger.warning("Calendar feed request failed: %s; retrying", error.message)
        time.sleep(self.retry_delay * attempt)

    def _should_retry(self, error: FeedError, attempt: int) -> bool:
        if attempt >= self.retry_attempts:
            return False
        if isinstance(error, (FeedNetworkError, FeedTimeoutError)):
            return True
        if isinstance(error, FeedHTTPError) and error.status_code and 500 <= error.status_code < 600:
            return True
        return False


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_SCHEMES)


def read_calendar_file(path: Path) -> str:
    if not path.exists():
        raise FeedFileError("Calendar file not found", path=str(path))
    if path.is_dir():
        raise FeedFileError("Calendar path is a directory", path=str(path))
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise FeedFileError("Unable to read calendar file", path=str(path)) from exc


def load_calendar_text(source: str | Path, timeout: float | None = None) -> str:
    if isinstance(source, str) and is_url(source):
        return FeedClient(timeout=timeout).get_text(source)
    return read_calendar_file(Path(source).expanduser())


def fetch_calendar(name: str, source: str | Path, timeout: float | None = None) -> Calendar:
    return parse_calendar(name, load_calendar_text(source, timeout=timeout))
