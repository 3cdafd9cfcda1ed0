"""Typed client for the Alpaca brokerage and market data REST APIs."""

from .config import Environment, TimeoutConfig, load_environment
from .core import (
    AlpacaError,
    APIError,
    ConfigurationError,
    DataNotFoundError,
    FetchResult,
    IteratorExhaustedError,
    NetworkError,
    Page,
    ParseError,
    RateLimitError,
    RequestTimeoutError,
)
from .pagination import PageFetcher, PageIterator, make_quotes_iterator, make_trades_iterator
from .resilience import RetryPolicy
from .rest import Client

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Environment",
    "TimeoutConfig",
    "load_environment",
    "RetryPolicy",
    "Page",
    "FetchResult",
    "PageFetcher",
    "PageIterator",
    "make_trades_iterator",
    "make_quotes_iterator",
    "AlpacaError",
    "APIError",
    "RateLimitError",
    "NetworkError",
    "RequestTimeoutError",
    "ParseError",
    "DataNotFoundError",
    "IteratorExhaustedError",
    "ConfigurationError",
]
