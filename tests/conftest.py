"""
Pytest fixtures for the podium snapshot tests.
"""
from datetime import datetime, timezone, timedelta
from urllib.parse import urlencode

import pytest


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int, payload=None, url: str = "") -> None:
        self.status_code = status_code
        self._payload = payload if payload is not None else []
        self.url = url

    def json(self):
        return self._payload


class FakeSession:
    """Replays a scripted list of status codes, recording every call."""

    def __init__(self, statuses: list[int], payload=None) -> None:
        self.statuses = list(statuses)
        self.payload = payload
        self.headers: dict = {}
        self.calls: list[tuple[str, dict]] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        status = self.statuses.pop(0)
        full_url = f"{url}?{urlencode(params)}" if params else url
        return FakeResponse(status, self.payload, url=full_url)


class FakeClient:
    """
    Serves canned records per endpoint.

    ``routes`` maps (endpoint, key) → records or an exception instance, where
    key is the session_key or year the request was made for.
    """

    def __init__(self, routes: dict) -> None:
        self.routes = routes
        self.requests: list[tuple[str, dict]] = []

    def get(self, endpoint, params=None):
        params = params or {}
        self.requests.append((endpoint, params))
        key = params.get("session_key", params.get("year"))
        result = self.routes[(endpoint, key)]
        if isinstance(result, Exception):
            raise result
        return result


def _position(driver: int, position: int, minute: int) -> dict:
    base = datetime(2024, 3, 2, 15, 0, 0, tzinfo=timezone.utc)
    return {
        "driver_number": driver,
        "position": position,
        "date": (base + timedelta(minutes=minute)).isoformat(),
        "session_key": 9472,
    }


@pytest.fixture
def sample_positions() -> list[dict]:
    """Position history: 16 leads early, 1 finishes first, 11 second, 55 third."""
    return [
        _position(1, 2, 0),
        _position(16, 1, 0),
        _position(11, 3, 0),
        _position(55, 4, 0),
        _position(44, 5, 0),
        _position(1, 1, 20),
        _position(16, 2, 20),
        _position(11, 2, 45),
        _position(16, 4, 45),
        _position(55, 3, 50),
    ]


@pytest.fixture
def sample_drivers() -> list[dict]:
    return [
        {"driver_number": 1, "full_name": "Max VERSTAPPEN", "team_name": "Red Bull Racing",
         "team_colour": "3671C6", "name_acronym": "VER",
         "headshot_url": "https://example.org/ver.png"},
        {"driver_number": 11, "full_name": "Sergio PEREZ", "team_name": "Red Bull Racing",
         "team_colour": "3671C6", "name_acronym": "PER", "headshot_url": None},
        {"driver_number": 16, "full_name": "Charles LECLERC", "team_name": "Ferrari",
         "team_colour": "E8002D", "name_acronym": "LEC",
         "headshot_url": "https://example.org/lec.png"},
    ]


@pytest.fixture
def sample_sessions() -> list[dict]:
    return [
        {"session_key": 9472, "meeting_key": 1229, "session_name": "Race",
         "date_start": "2024-03-02T15:00:00+00:00", "circuit_short_name": "Sakhir",
         "location": "Sakhir"},
        {"session_key": 9480, "meeting_key": 1230, "session_name": "Sprint",
         "date_start": "2024-04-20T07:00:00+00:00", "circuit_short_name": "Shanghai",
         "location": "Shanghai"},
        {"session_key": 9481, "meeting_key": 1230, "session_name": "Race",
         "date_start": "2024-04-21T07:00:00+00:00", "circuit_short_name": "Shanghai",
         "location": "Shanghai"},
        {"session_key": 9490, "meeting_key": 9999, "session_name": "Race",
         "date_start": "2024-05-05T20:00:00+00:00", "circuit_short_name": "Miami",
         "location": "Miami"},
    ]


@pytest.fixture
def sample_meetings() -> list[dict]:
    return [
        {"meeting_key": 1229, "meeting_name": "Bahrain Grand Prix", "location": "Sakhir",
         "country_name": "Bahrain", "country_code": "BRN",
         "country_flag": "https://example.org/brn.png",
         "circuit_image": "https://example.org/sakhir.png"},
        {"meeting_key": 1230, "meeting_name": "Chinese Grand Prix", "location": "Shanghai",
         "country_name": "China", "country_code": "CHN",
         "country_flag": None, "circuit_image": None},
    ]


@pytest.fixture
def fake_session():
    """Factory: fake_session([429, 200], payload=[...])."""
    return FakeSession


@pytest.fixture
def fake_client():
    """Factory: fake_client({("/drivers", 9472): [...]})."""
    return FakeClient
