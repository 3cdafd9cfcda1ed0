"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import httpx
import pytest

from alpaca_markets.config.settings import Environment
from alpaca_markets.observability.logger import reset_logging
from alpaca_markets.rest.client import Client

# Every variable Environment reads; cleared so the host shell cannot leak in
CONFIG_ENV_VARS = (
    "APCA_API_KEY_ID",
    "APCA_API_SECRET_KEY",
    "APCA_API_BASE_URL",
    "APCA_API_DATA_URL",
    "ALPACA_MARKETS_KEY_ID",
    "ALPACA_MARKETS_SECRET_KEY",
    "ALPACA_MARKETS_TRADING_URL",
    "ALPACA_MARKETS_DATA_URL",
    "ALPACA_MARKETS_STREAM_URL",
)


class MockAPI:
    """Canned responses keyed by (method, path) for httpx.MockTransport.

    Responses registered for a route are served in order; the last one is
    repeated. Unknown routes answer 404 with the API's error shape.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        *,
        status: int = 200,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> None:
        # Stored as kwargs; each request gets a fresh httpx.Response
        response: dict[str, Any] = {"status_code": status, "headers": headers}
        if content is not None:
            response["content"] = content
        elif json is not None:
            response["json"] = json
        self.routes.setdefault((method.upper(), path), []).append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"code": 40410000, "message": "endpoint not found"})
        spec = queue.pop(0) if len(queue) > 1 else queue[0]
        return httpx.Response(**spec)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method.upper() and r.url.path == path]

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path) -> None:
    """Run every test without credentials and away from any .env file."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Undo logging configuration installed by a test (e.g. the CLI)."""
    yield
    reset_logging()


@pytest.fixture
def environment() -> Environment:
    return Environment(
        api_key_id="PKTEST1234567890",
        api_secret_key="secret-abcdefghijklmnop",
        trading_base_url="https://paper-api.alpaca.markets",
    )


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest.fixture
def sleeps() -> list[float]:
    """Delays requested by the retry loop, in seconds."""
    return []


@pytest.fixture
def client(environment, api, sleeps) -> Iterator[Client]:
    http = api.http_client()
    with Client(environment, sleeper=sleeps.append, trading_http=http, data_http=http) as c:
        yield c
    http.close()
