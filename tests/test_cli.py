from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from samples import wrap_event
from icsfeed import __version__
from icsfeed.cli import app
from icsfeed.feed import client as client_module

runner = CliRunner()


@pytest.fixture
def calendar_file(tmp_path: Path) -> Path:
    path = tmp_path / "work.ics"
    path.write_text(
        wrap_event(
            "UID:1",
            "SUMMARY:Standup",
            "DTSTART;TZID=Europe/Paris:20240506T090000",
            "DTEND;TZID=Europe/Paris:20240506T091500",
        ),
        encoding="utf-8",
    )
    return path


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_parse_prints_events(calendar_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(calendar_file)])
    assert result.exit_code == 0
    assert "1 | 2024-05-06T09:00:00 [Europe/Paris] -> 2024-05-06T09:15:00 [Europe/Paris] | Standup" in result.output
    assert "Total: 1 event(s)" in result.output


def test_parse_json(calendar_file: Path) -> None:
    result = runner.invoke(app, ["parse", str(calendar_file), "--json", "--name", "work"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["name"] == "work"
    assert data["events"][0]["start"] == {
        "timestamp": "2024-05-06T09:00:00",
        "timezone_id": "Europe/Paris",
        "only_date": False,
    }


def test_parse_uses_configured_calendar_name(calendar_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ICSFEED_CALENDAR_NAME", "from-env")
    result = runner.invoke(app, ["parse", str(calendar_file), "--json"])
    assert json.loads(result.output)["name"] == "from-env"


def test_parse_empty_calendar(tmp_path: Path) -> None:
    path = tmp_path / "empty.ics"
    path.write_text("BEGIN:VCALENDAR\nEND:VCALENDAR\n", encoding="utf-8")
    result = runner.invoke(app, ["parse", str(path), "--name", "empty"])
    assert result.exit_code == 0
    assert "No events found in empty." in result.output


def test_parse_invalid_envelope(tmp_path: Path) -> None:
    path = tmp_path / "bad.ics"
    path.write_text("not a calendar", encoding="utf-8")
    result = runner.invoke(app, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Invalid Calendar" in result.output


def test_parse_malformed_date(tmp_path: Path) -> None:
    path = tmp_path / "bad-date.ics"
    path.write_text(wrap_event("DTSTART:not-a-date"), encoding="utf-8")
    result = runner.invoke(app, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Invalid Date" in result.output


def test_parse_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["parse", str(tmp_path / "nope.ics")])
    assert result.exit_code == 1
    assert "File Error" in result.output


def test_fetch(monkeypatch: pytest.MonkeyPatch) -> None:
    class Response:
        ok = True
        status_code = 200
        encoding = "utf-8"
        text = wrap_event("UID:remote", "DTSTART;VALUE=DATE:20240506")

    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen["timeout"] = timeout
        return Response()

    monkeypatch.setattr(client_module.requests, "get", fake_get)
    result = runner.invoke(app, ["fetch", "https://example.com/cal.ics", "--timeout", "4"])
    assert result.exit_code == 0
    assert "remote | 2024-05-06 -> - |" in result.output
    assert seen["timeout"] == 4


def test_fetch_rejects_local_path(calendar_file: Path) -> None:
    result = runner.invoke(app, ["fetch", str(calendar_file)])
    assert result.exit_code == 1
    assert "URL Error" in result.output
