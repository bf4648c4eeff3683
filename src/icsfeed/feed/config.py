"""Configuration loader for calendar feeds."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import DEFAULT_CALENDAR_NAME, DEFAULT_TIMEOUT_SECONDS
from .errors import FeedConfigError


@dataclass(frozen=True)
class FeedConfig:
    timeout_seconds: float
    retry_attempts: int
    retry_delay_seconds: float
    calendar_name: str


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise FeedConfigError(f"Environment variable {name} must be a number", details={"value": raw}) from exc


def load_config() -> FeedConfig:
    return FeedConfig(
        timeout_seconds=_env_number("ICSFEED_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS), float),
        retry_attempts=_env_number("ICSFEED_RETRY_ATTEMPTS", "3", int),
        retry_delay_seconds=_env_number("ICSFEED_RETRY_DELAY", "1", float),
        calendar_name=os.getenv("ICSFEED_CALENDAR_NAME") or DEFAULT_CALENDAR_NAME,
    )
