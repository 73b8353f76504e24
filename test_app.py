from datetime import datetime

import pytest
import pytz
from fastapi.testclient import TestClient
from icalendar import Calendar

from icalblocker.api.app import create_app
from icalblocker.config.settings import ServerSettings

FIXED_NOW = datetime(2024, 6, 15, 8, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def client() -> TestClient:
    app = create_app(ServerSettings(), clock=lambda: FIXED_NOW)
    return TestClient(app)


def _vevents(body: bytes) -> list:
    return list(Calendar.from_ical(body).walk("VEVENT"))


def test_feed_without_params_returns_default_calendar(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/calendar; charset=utf-8"
    assert response.headers["content-disposition"] == 'attachment; filename="calendar.ics"'
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"

    events = _vevents(response.content)
    assert len(events) == 46
    assert events[0]["DTSTART"].to_ical() == b"20240614"
    assert all(str(event["SUMMARY"]) == "Special Ical Block" for event in events)


def test_feed_flat_params_single_mode(client: TestClient) -> None:
    response = client.get("/", params={"days": "5", "name": "Maintenance", "single": "true"})

    events = _vevents(response.content)
    assert len(events) == 1
    assert events[0]["DTSTART"].to_ical() == b"20240614"
    assert events[0]["DTEND"].to_ical() == b"20240620"
    assert str(events[0]["SUMMARY"]) == "Maintenance"


@pytest.mark.parametrize("days", ["-1", "99999", "abc", "9" * 5000])
def test_feed_clamps_out_of_range_days(client: TestClient, days: str) -> None:
    response = client.get("/", params={"days": days})

    assert response.status_code == 200
    assert len(_vevents(response.content)) == 46


def test_feed_events_array_combines_configs(client: TestClient) -> None:
    response = client.get(
        "/",
        params={"events": '[{"days": 1, "name": "A"}, {"days": 2, "name": "B", "single": "true"}]'},
    )

    assert response.status_code == 200
    summaries = [str(event["SUMMARY"]) for event in _vevents(response.content)]
    assert summaries == ["A", "A", "B"]


@pytest.mark.parametrize(
    "events, message",
    [
        ("not-json", 'Invalid "events" parameter. Must be valid JSON.'),
        ("{}", 'Invalid "events" parameter. Must be a JSON array.'),
        ("[NaN]", 'Invalid "events" parameter. Must be valid JSON.'),
        ("[" * 5000, 'Invalid "events" parameter. Must be valid JSON.'),
        ("[1,", 'Invalid "events" parameter. Must be valid JSON.'),
        ("'[]'", 'Invalid "events" parameter. Must be valid JSON.'),
    ],
)
def test_feed_rejects_malformed_events(client: TestClient, events: str, message: str) -> None:
    response = client.get("/", params={"events": events})

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == message
    assert "BEGIN:VCALENDAR" not in response.text


def test_feed_uses_configured_path() -> None:
    app = create_app(ServerSettings(feed_path="/calendar.ics"), clock=lambda: FIXED_NOW)
    client = TestClient(app)

    assert client.get("/calendar.ics", params={"days": "0"}).status_code == 200
    assert client.get("/").status_code == 404


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
