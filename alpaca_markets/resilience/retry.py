"""Retry policy with exponential backoff.

Decides whether an HTTP outcome should be retried and how long to wait
before the next attempt. The policy never sleeps or loops itself; the
transport drives the attempt loop:

    attempt = 0
    while True:
        status = send()
        if ok(status):
            break
        if policy.should_retry(status) and attempt < policy.max_retries:
            sleep(policy.get_delay(attempt))
            attempt += 1
        else:
            raise ...

Example with defaults:
    attempt 0: 100ms
    attempt 1: 200ms
    attempt 2: 400ms
    attempt 3: 800ms
    ...
    capped at 5000ms
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from alpaca_markets.config.constants import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_INITIAL_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
)

RATE_LIMIT_STATUS = 429
SERVER_ERROR_STATUS = 500

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff without jitter.

    delay = min(initial_delay * (multiplier ^ attempt), max_delay)

    Attributes:
        max_retries: Maximum retry attempts (0 disables retries)
        initial_delay: Delay before the first retry
        max_delay: Upper bound for any computed delay
        backoff_multiplier: Growth factor per attempt (>= 1.0)

    An initial_delay above max_delay is rejected rather than clamped, so
    get_delay(0) returns initial_delay unchanged and still never exceeds
    max_delay.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: timedelta = timedelta(milliseconds=DEFAULT_INITIAL_DELAY_MS)
    max_delay: timedelta = timedelta(milliseconds=DEFAULT_MAX_DELAY_MS)
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("RetryPolicy requires a non-negative max_retries")
        if self.backoff_multiplier < 1.0:
            raise ValueError("RetryPolicy requires backoff_multiplier >= 1.0")
        if self.initial_delay < timedelta(0) or self.initial_delay > self.max_delay:
            raise ValueError("RetryPolicy requires 0 <= initial_delay <= max_delay")

    @classmethod
    def default(cls) -> RetryPolicy:
        """3 retries, 100ms initial delay doubling up to 5s."""
        return cls()

    @classmethod
    def no_retries(cls) -> RetryPolicy:
        """Disable retries; delays stay at their defaults."""
        return cls(max_retries=0)

    def should_retry(self, status_code: int) -> bool:
        """Check if a response status is transient.

        Args:
            status_code: HTTP status code of the failed attempt

        Returns:
            True for 429 (rate limited) and any 5xx
        """
        return status_code == RATE_LIMIT_STATUS or status_code >= SERVER_ERROR_STATUS

    def get_delay(self, attempt: int) -> timedelta:
        """Calculate delay for a retry attempt.

        Args:
            attempt: Retry counter (0-based)

        Returns:
            Delay truncated to whole milliseconds, capped at max_delay
        """
        if attempt <= 0:
            return self.initial_delay

        max_ms = self.max_delay / _ONE_MS
        delay_ms = self.initial_delay / _ONE_MS
        for _ in range(attempt):
            delay_ms *= self.backoff_multiplier
            if delay_ms >= max_ms + 1:
                # Past the cap; truncation cannot bring it back under
                return self.max_delay

        # Truncate once, after all multiplications
        computed = timedelta(milliseconds=int(delay_ms))
        return min(computed, self.max_delay)

    def get_delay_seconds(self, attempt: int) -> float:
        """Same as get_delay, in seconds for time.sleep."""
        return self.get_delay(attempt).total_seconds()
