"""Pytest configuration and shared fixtures."""

import json

import httpx
import pytest

from sleeper_mcp.integrations.sleeper_api import SleeperAPIClient
from sleeper_mcp.server import SleeperMCPServer

BASE_URL = "https://api.sleeper.app/v1"


class FakeSleeper:
    """Stand-in for the Sleeper API behind an httpx.MockTransport.

    Records every request; replies with ``status``/``body`` or raises
    ``error`` when set.
    """

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = {"ok": True}
        self.text = None
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(
            self.status,
            content=json.dumps(self.body).encode(),
            headers={"content-type": "application/json"},
        )


@pytest.fixture
def upstream():
    """Fake Sleeper API recording outgoing requests."""
    return FakeSleeper()


@pytest.fixture
def sleeper_client(upstream):
    """SleeperAPIClient wired to the fake upstream."""
    return SleeperAPIClient(base_url=BASE_URL, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def sleeper_server(sleeper_client):
    """SleeperMCPServer wired to the fake upstream."""
    return SleeperMCPServer(sleeper_client)
