# Shared fixtures for MeigetsuID client tests.
# Created: 2026-10-19

import copy
import json

import httpx
import pytest

from meigetsuid.client import MeigetsuID
from meigetsuid.config import Settings, reset_settings

API_ROOT = "https://id.test/api/v2"

WIRE_TOKEN = {
    "access_token": "access-abc",
    "refresh_token": "refresh-xyz",
    "expires_at": {
        "access_token": "2026-10-19T12:00:00.000Z",
        "refresh_token": "2026-11-18T12:00:00.000Z",
    },
}


class FakeServer:
    """Records outgoing requests and answers each with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body = None
        self.text_body = ""

    def reply(self, status_code=200, json_body=None, text=""):
        self.status_code = status_code
        self.json_body = json_body
        self.text_body = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, text=self.text_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _clean_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    return Settings(server=API_ROOT)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def wire_token():
    return copy.deepcopy(WIRE_TOKEN)


@pytest.fixture
def client(server, settings, wire_token):
    return MeigetsuID(wire_token, settings=settings, transport=server.transport)
