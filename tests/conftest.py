"""Shared fixtures: a Freshdesk client wired to an in-process mock server."""
import json
from typing import Callable, List

import httpx
import pytest

from freshdesk_client import Freshdesk

BASE_URL = "https://demo.freshdesk.com"
API_KEY = "test-api-key"


class MockServer:
    """Records every request and answers through a swappable handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    def reply(self, status_code: int = 200, **kwargs) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def echo(self) -> None:
        self.handler = lambda request: httpx.Response(
            200, content=request.content, headers={"Content-Type": "application/json"})

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def server():
    return MockServer()


@pytest.fixture
def freshdesk(server):
    return Freshdesk(BASE_URL, API_KEY, transport=server.transport)
