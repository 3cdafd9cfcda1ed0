"""Error hierarchy for the Alpaca client.

All client errors inherit from AlpacaError.
Use `is_retryable` property to determine if an error can be retried.
"""

from __future__ import annotations

import json
from typing import Any

import httpx


class AlpacaError(Exception):
    """Base error for all client errors.

    Attributes:
        message: Error description
        endpoint: Request path that failed (if applicable)
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
    ) -> None:
        self.message = message
        self.endpoint = endpoint
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        """Whether this error can be retried."""
        return False

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "endpoint": self.endpoint,
            "is_retryable": self.is_retryable,
        }


class NetworkError(AlpacaError):
    """No response was received at all.

    This is retryable by the caller - might be a temporary network issue.
    """

    def __init__(
        self,
        message: str = "Network error",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)

    @property
    def is_retryable(self) -> bool:
        return True


class RequestTimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        timeout_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["timeout_seconds"] = self.timeout_seconds
        return d


class APIError(AlpacaError):
    """Non-success HTTP status returned by the API.

    The API reports failures as ``{"code": 40010000, "message": "..."}``.
    Retryable for 429 and 5xx, like RetryPolicy.should_retry.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        api_code: int = 0,
        body: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.api_code = api_code
        self.body = body

    def __str__(self) -> str:
        text = f"{self.message} (HTTP {self.status_code}"
        if self.api_code:
            text += f", Code {self.api_code}"
        return text + ")"

    @property
    def is_retryable(self) -> bool:
        return self.status_code == 429 or self.status_code >= 500

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: str,
        *,
        endpoint: str | None = None,
        **kwargs: Any,
    ) -> APIError:
        """Build an error from a raw response body.

        Falls back to the raw body as the message when it is not the
        API's JSON error shape.
        """
        api_code = 0
        message = body
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            if isinstance(payload.get("code"), int):
                api_code = payload["code"]
            if isinstance(payload.get("message"), str):
                message = payload["message"]

        return cls(
            message,
            status_code=status_code,
            api_code=api_code,
            body=body,
            endpoint=endpoint,
            **kwargs,
        )

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["status_code"] = self.status_code
        d["api_code"] = self.api_code
        return d


class RateLimitError(APIError):
    """Rate limit exceeded (HTTP 429).

    This is retryable after waiting for `retry_after` seconds.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: float | None = None,
        status_code: int = 429,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["retry_after"] = self.retry_after
        return d


class ParseError(AlpacaError):
    """Payload did not match the expected shape.

    This is NOT retryable - the data format is invalid.
    """

    def __init__(
        self,
        message: str = "Parse error",
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["field"] = self.field
        d["value"] = str(self.value) if self.value is not None else None
        return d


class DataNotFoundError(AlpacaError):
    """Requested symbol is missing from an otherwise valid response."""

    def __init__(
        self,
        message: str = "Data not found",
        *,
        symbol: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.symbol = symbol


class IteratorExhaustedError(AlpacaError):
    """next() was called on a page iterator that has no more pages.

    A usage error, never a network condition.
    """

    def __init__(self, message: str = "Iterator exhausted", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ConfigurationError(AlpacaError):
    """Required configuration is missing or invalid."""


def classify_transport_error(error: httpx.HTTPError, endpoint: str) -> NetworkError:
    """Classify an httpx exception raised before any response arrived.

    Args:
        error: The httpx exception
        endpoint: Request path for context

    Returns:
        RequestTimeoutError for timeouts, NetworkError otherwise
    """
    if isinstance(error, httpx.TimeoutException):
        return RequestTimeoutError(
            f"Call to {endpoint} timed out: {error}",
            endpoint=endpoint,
        )
    return NetworkError(
        f"Call to {endpoint} returned an empty response: {error}",
        endpoint=endpoint,
    )
