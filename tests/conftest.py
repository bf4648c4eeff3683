from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_feed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ICSFEED_TIMEOUT", "ICSFEED_RETRY_ATTEMPTS", "ICSFEED_RETRY_DELAY", "ICSFEED_CALENDAR_NAME"):
        monkeypatch.delenv(name, raising=False)
