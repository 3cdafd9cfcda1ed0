"""Core infrastructure for the Alpaca client."""

from .errors import (
    AlpacaError,
    APIError,
    ConfigurationError,
    DataNotFoundError,
    IteratorExhaustedError,
    NetworkError,
    ParseError,
    RateLimitError,
    RequestTimeoutError,
    classify_transport_error,
)
from .types import FetchResult, Page

__all__ = [
    # Errors
    "AlpacaError",
    "APIError",
    "RateLimitError",
    "NetworkError",
    "RequestTimeoutError",
    "ParseError",
    "DataNotFoundError",
    "IteratorExhaustedError",
    "ConfigurationError",
    "classify_transport_error",
    # Types
    "Page",
    "FetchResult",
]
