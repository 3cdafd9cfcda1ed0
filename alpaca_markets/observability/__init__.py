"""Observability infrastructure for the Alpaca client.

Provides structured logging.
"""

from .logger import LogContext, get_logger, log_context, setup_logging

__all__ = [
    "LogContext",
    "get_logger",
    "log_context",
    "setup_logging",
]
