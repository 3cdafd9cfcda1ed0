"""Configuration module for the Alpaca client."""

from .constants import (
    # Base URLs
    DATA_BASE_URL,
    TRADING_BASE_URL_LIVE,
    TRADING_BASE_URL_PAPER,
    # Retry
    DEFAULT_MAX_RETRIES,
    # Page sizes
    DEFAULT_MARKET_DATA_LIMIT,
    DEFAULT_NEWS_LIMIT,
)
from .settings import Environment, TimeoutConfig, load_environment

__all__ = [
    "Environment",
    "TimeoutConfig",
    "load_environment",
    "DATA_BASE_URL",
    "TRADING_BASE_URL_LIVE",
    "TRADING_BASE_URL_PAPER",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MARKET_DATA_LIMIT",
    "DEFAULT_NEWS_LIMIT",
]
