"""
Shared fixtures: a recording stand-in for aiohttp.ClientSession.
"""

import json

import pytest

from open_notify.client import OpenNotifyClient
from open_notify.config import Config


class FakeResponse:
    """Async context manager mimicking aiohttp.ClientResponse."""

    def __init__(self, body: str, status: int):
        self.status = status
        self._body = body

    async def text(self):
        if isinstance(self._body, bytes):
            return self._body.decode("utf-8")
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Records every GET and answers with a canned body or raises a canned error."""

    def __init__(self, body="", status=200, error=None):
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        self.body = body
        self.status = status
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, params=None, **kwargs):
        self.calls.append((url, params))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body, self.status)

    async def close(self):
        self.closed = True


@pytest.fixture
def make_client():
    """Build a client wired to a FakeSession; returns (client, session)."""
    def factory(body="", status=200, error=None, **config):
        session = FakeSession(body, status, error)
        return OpenNotifyClient(Config(**config), session=session), session
    return factory


@pytest.fixture
def astros_payload():
    return {
        "message": "success",
        "number": 6,
        "people": [
            {"name": "Anton Shkaplerov", "craft": "ISS"},
            {"name": "Scott Tingle", "craft": "ISS"},
            {"name": "Norishige Kanai", "craft": "ISS"},
            {"name": "Oleg Artemyev", "craft": "Soyuz MS-08"},
            {"name": "Andrew Feustel", "craft": "Soyuz MS-08"},
            {"name": "Richard Arnold", "craft": "Soyuz MS-08"},
        ],
    }


@pytest.fixture
def iss_now_payload():
    return {
        "message": "success",
        "timestamp": 1609459200,
        "iss_position": {"latitude": "-52.9", "longitude": "135.5"},
    }


@pytest.fixture
def pass_times_payload():
    return {
        "message": "success",
        "request": {
            "altitude": 440,
            "datetime": 1521975020,
            "latitude": 51.0,
            "longitude": 13.5,
            "passes": 3,
        },
        "response": [
            {"duration": 534, "risetime": 1521979307},
            {"duration": 651, "risetime": 1521985012},
            {"duration": 610, "risetime": 1521990852},
        ],
    }
