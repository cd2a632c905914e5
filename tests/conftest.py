"""Shared fixtures for the Doohly client tests."""

import json
from collections.abc import Callable

import httpx
import pytest
import structlog

from doohly import configuration
from doohly.api_client import DoohlyClient

API_TOKEN = "test_api_token_123"
BASE_URL = configuration.DEFAULT_API_BASE_URL


@pytest.fixture(autouse=True)
def reset_global_configuration():
    """Each test starts from (and leaves) pristine global configuration and logging."""
    configuration.reset_configuration()
    yield
    configuration.reset_configuration()
    structlog.reset_defaults()


class Recorder:
    """Mock transport handler returning a canned response and recording requests."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.payload: object = {}
        self.content_type: str | None = "application/json"

    def respond(
        self,
        status: int = 200,
        payload: object = None,
        content_type: str | None = "application/json",
    ) -> None:
        self.status = status
        self.payload = {} if payload is None else payload
        self.content_type = content_type

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        headers = {"Content-Type": self.content_type} if self.content_type else {}
        if isinstance(self.payload, str):
            content = self.payload.encode()
        else:
            content = json.dumps(self.payload).encode()
        return httpx.Response(self.status, headers=headers, content=content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    """Canned-response handler for httpx.MockTransport."""
    return Recorder()


@pytest.fixture
def make_client(recorder: Recorder) -> Callable[..., DoohlyClient]:
    """Factory for clients wired to the recording mock transport."""

    def factory(**kwargs) -> DoohlyClient:
        kwargs.setdefault("api_token", API_TOKEN)
        return DoohlyClient(transport=httpx.MockTransport(recorder), **kwargs)

    return factory


@pytest.fixture
def api_client(make_client) -> DoohlyClient:
    """Client with the test token against the default base URL."""
    with make_client() as api_client:
        yield api_client
