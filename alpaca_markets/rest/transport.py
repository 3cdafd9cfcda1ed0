"""HTTP transport for the Alpaca REST APIs.

Wraps an httpx.Client bound to one base URL (trading or market data):
- Static API key headers on every request
- Retry loop driven by RetryPolicy (429 and 5xx only)
- Non-success statuses mapped to APIError / RateLimitError
- Connection failures mapped to NetworkError, never retried here
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import httpx

from alpaca_markets.config.constants import API_KEY_ID_HEADER, API_SECRET_KEY_HEADER
from alpaca_markets.config.settings import Environment, TimeoutConfig
from alpaca_markets.core.errors import APIError, ParseError, RateLimitError, classify_transport_error
from alpaca_markets.observability.logger import get_logger, log_context
from alpaca_markets.resilience.retry import RATE_LIMIT_STATUS, RetryPolicy

logger = get_logger(__name__)

Sleeper = Callable[[float], None]


def encode_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Render query parameters the way the API expects.

    None, "" and False are dropped, lists are comma-joined, enums use their
    wire value and True becomes "true".
    """
    if not params:
        return {}

    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value is False or value == "":
            continue
        if isinstance(value, Enum):
            value = value.value
        if value is True:
            encoded[key] = "true"
        elif isinstance(value, (list, tuple)):
            if not value:
                continue
            encoded[key] = ",".join(str(v.value if isinstance(v, Enum) else v) for v in value)
        else:
            encoded[key] = str(value)
    return encoded


def _retry_after(response: httpx.Response) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class RestTransport:
    """Synchronous JSON-over-HTTP transport for one API host.

    Usage:
        transport = RestTransport(env.data_base_url, env)
        payload = transport.request("GET", "/v2/stocks/AAPL/trades/latest")
    """

    def __init__(
        self,
        base_url: str,
        environment: Environment,
        *,
        retry_policy: RetryPolicy | None = None,
        timeouts: TimeoutConfig | None = None,
        sleeper: Sleeper = time.sleep,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            base_url: Scheme and host of the API (e.g. https://data.alpaca.markets)
            environment: Credentials sent as headers
            retry_policy: Backoff policy (default: RetryPolicy())
            timeouts: Request timeouts (default: TimeoutConfig())
            sleeper: Called with the backoff delay in seconds
            http_client: Pre-built httpx client (tests inject a MockTransport);
                the transport does not close clients it did not create
        """
        self.base_url = base_url.rstrip("/")
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeouts = timeouts or TimeoutConfig()
        self._sleep = sleeper
        self._headers = {
            API_KEY_ID_HEADER: environment.api_key_id,
            API_SECRET_KEY_HEADER: environment.api_secret_key,
        }

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.timeouts.to_httpx())

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> RestTransport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request, retrying transient statuses.

        Args:
            method: HTTP method
            path: Request path, starting with "/"
            params: Query parameters (see encode_params)
            json: JSON body for POST/PATCH/PUT

        Returns:
            Decoded JSON body, or None for an empty body (e.g. 204)

        Raises:
            APIError: Non-success status after retries (RateLimitError for 429)
            NetworkError: No response was received
            ParseError: Body was not valid JSON
        """
        url = f"{self.base_url}{path}"
        query = encode_params(params)

        with log_context(endpoint=path, method=method.upper()):
            attempt = 0
            while True:
                try:
                    response = self._client.request(
                        method,
                        url,
                        params=query or None,
                        json=json,
                        headers=self._headers,
                    )
                except httpx.HTTPError as e:
                    error = classify_transport_error(e, path)
                    logger.error(f"Request failed: {error}", extra={"error": error.to_dict()})
                    raise error from e

                if response.is_success:
                    return self._decode(response, path)

                status = response.status_code
                if self.retry_policy.should_retry(status) and attempt < self.retry_policy.max_retries:
                    delay = self.retry_policy.get_delay_seconds(attempt)
                    logger.warning(
                        f"Retry {attempt + 1}/{self.retry_policy.max_retries} after {delay:.3f}s",
                        extra={"status_code": status},
                    )
                    self._sleep(delay)
                    attempt += 1
                    continue

                raise self._error_for(response, path)

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(
                f"Call to {path} returned a body that is not valid JSON",
                endpoint=path,
                value=response.text[:200],
            ) from e

    @staticmethod
    def _error_for(response: httpx.Response, path: str) -> APIError:
        status = response.status_code
        if status == RATE_LIMIT_STATUS:
            error: APIError = RateLimitError.from_response(
                status,
                response.text,
                endpoint=path,
                retry_after=_retry_after(response),
            )
        else:
            error = APIError.from_response(status, response.text, endpoint=path)

        logger.error(f"Call to {path} returned an HTTP {status}", extra={"error": error.to_dict()})
        return error
