"""Resilience patterns for API calls."""

from .retry import RetryPolicy

__all__ = ["RetryPolicy"]
