"""Shared test configuration and fixtures for all tests."""

from typing import List, Optional

import httpx
import pytest

from sign_latency.shared.config import Config
from sign_latency.shared.stamper import Stamp
from sign_latency.const import STAMP_HEADER_NAME
from .test_const import (
    ALL_ENV_VARS, MOCK_SIGN_RESPONSE, TEST_STAMP_VALUE,
    TEST_PRIVATE_KEY, TEST_PUBLIC_KEY, TEST_ORGANIZATION_ID, TEST_SIGN_WITH_ADDRESS, TEST_BASE_URL,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any real configuration from the environment."""
    for name in ALL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeStamper:
    """Stamper that records bodies and returns a fixed header."""

    def __init__(self):
        self.bodies: List[str] = []

    def stamp(self, body: str) -> Stamp:
        self.bodies.append(body)
        return Stamp(header_name=STAMP_HEADER_NAME, header_value=TEST_STAMP_VALUE)


class TracingTransport(httpx.AsyncBaseTransport):
    """In-process transport that fires httpcore-style trace events.

    fail_on is the 1-based request number that raises a connection error.
    """

    def __init__(self, status_code: int = 200, json_body: Optional[dict] = None,
                 fail_on: Optional[int] = None, fire_events: bool = True):
        self.status_code = status_code
        self.json_body = MOCK_SIGN_RESPONSE if json_body is None else json_body
        self.fail_on = fail_on
        self.fire_events = fire_events
        self.requests: List[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_on is not None and len(self.requests) == self.fail_on:
            raise httpx.ConnectError("connection refused", request=request)

        trace = request.extensions.get("trace")
        if trace is not None and self.fire_events:
            await trace("connection.connect_tcp.started", {})
            await trace("connection.connect_tcp.complete", {})
            await trace("connection.start_tls.started", {})
            await trace("connection.start_tls.complete", {})
        return httpx.Response(self.status_code, json=self.json_body, request=request)


@pytest.fixture
def fake_stamper():
    """Stamper fixture."""
    return FakeStamper()


@pytest.fixture
def transport():
    """Successful transport fixture."""
    return TracingTransport()


@pytest.fixture
def make_config():
    """Factory for configs that ignore the environment file."""
    def _make(**overrides) -> Config:
        values = dict(
            api_private_key=TEST_PRIVATE_KEY,
            api_public_key=TEST_PUBLIC_KEY,
            organization_id=TEST_ORGANIZATION_ID,
            sign_with=TEST_SIGN_WITH_ADDRESS,
            base_url=TEST_BASE_URL,
        )
        values.update(overrides)
        return Config(_env_file=None, **values)
    return _make
