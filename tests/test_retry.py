"""Tests for alpaca_markets/resilience/retry.py."""

from datetime import timedelta

import pytest

from alpaca_markets.resilience.retry import RetryPolicy


def ms(value: int) -> timedelta:
    return timedelta(milliseconds=value)


class TestShouldRetry:
    """Tests for RetryPolicy.should_retry()."""

    @pytest.mark.parametrize("status", [429, 500, 502, 503, 504, 599])
    def test_transient_statuses(self, status):
        """429 and every 5xx are retried."""
        assert RetryPolicy().should_retry(status) is True

    @pytest.mark.parametrize("status", [200, 201, 204, 400, 401, 403, 404, 422])
    def test_other_statuses(self, status):
        """Success and client errors other than 429 are not retried."""
        assert RetryPolicy().should_retry(status) is False

    def test_no_retries_policy_still_answers(self):
        """should_retry is a pure status check, independent of max_retries."""
        assert RetryPolicy.no_retries().should_retry(503) is True


class TestGetDelay:
    """Tests for RetryPolicy.get_delay()."""

    def test_attempt_zero_is_initial_delay(self):
        """Attempt 0 returns initial_delay exactly."""
        policy = RetryPolicy(initial_delay=ms(250), max_delay=ms(1000), backoff_multiplier=3.0)
        assert policy.get_delay(0) == ms(250)

    def test_negative_attempt_is_initial_delay(self):
        """Negative attempts are treated like attempt 0."""
        assert RetryPolicy().get_delay(-3) == ms(100)

    def test_default_sequence(self):
        """Default policy doubles from 100ms."""
        policy = RetryPolicy()
        assert policy.get_delay(1) == ms(200)
        assert policy.get_delay(2) == ms(400)
        assert policy.get_delay(3) == ms(800)

    def test_clamped_to_max_delay(self):
        """Growth past max_delay is clamped (uncapped would be 100000ms)."""
        policy = RetryPolicy(initial_delay=ms(1000), max_delay=ms(5000), backoff_multiplier=10.0)
        assert policy.get_delay(2) == ms(5000)

    def test_default_caps_at_five_seconds(self):
        """Large attempts never exceed the default 5s cap."""
        assert RetryPolicy().get_delay(10) == ms(5000)
        assert RetryPolicy().get_delay(1000) == ms(5000)

    def test_truncates_once_after_multiplying(self):
        """Fractional milliseconds survive until the final truncation.

        7 * 1.5 = 10.5 -> 15.75 -> 23.625 -> 23ms. Truncating per step
        would give 7 -> 10 -> 15 -> 22ms.
        """
        policy = RetryPolicy(initial_delay=ms(7), max_delay=ms(5000), backoff_multiplier=1.5)
        assert policy.get_delay(3) == ms(23)

    def test_multiplier_one_is_constant(self):
        """A multiplier of 1.0 keeps the initial delay."""
        policy = RetryPolicy(initial_delay=ms(300), backoff_multiplier=1.0)
        assert policy.get_delay(5) == ms(300)

    def test_delay_seconds(self):
        """get_delay_seconds converts for time.sleep."""
        assert RetryPolicy().get_delay_seconds(1) == pytest.approx(0.2)


class TestPresets:
    """Tests for the default and no-retry presets."""

    def test_default_equals_constructor(self):
        """RetryPolicy() and RetryPolicy.default() are identical."""
        assert RetryPolicy() == RetryPolicy.default()

    def test_default_values(self):
        """Defaults are 3 retries, 100ms doubling up to 5s."""
        policy = RetryPolicy.default()
        assert policy.max_retries == 3
        assert policy.initial_delay == ms(100)
        assert policy.max_delay == ms(5000)
        assert policy.backoff_multiplier == 2.0

    def test_no_retries(self):
        """no_retries only changes max_retries."""
        policy = RetryPolicy.no_retries()
        assert policy.max_retries == 0
        assert policy.initial_delay == RetryPolicy().initial_delay
        assert policy.get_delay(1) == ms(200)


class TestValidation:
    """Tests for RetryPolicy construction checks."""

    def test_negative_max_retries(self):
        with pytest.raises(ValueError):
            RetryPolicy(max_retries=-1)

    def test_multiplier_below_one(self):
        with pytest.raises(ValueError):
            RetryPolicy(backoff_multiplier=0.5)

    def test_initial_above_max(self):
        """Rejected, so get_delay(0) == initial_delay never exceeds max_delay."""
        with pytest.raises(ValueError, match="initial_delay <= max_delay"):
            RetryPolicy(initial_delay=ms(6000), max_delay=ms(5000))

    def test_initial_equal_to_max(self):
        policy = RetryPolicy(initial_delay=ms(5000), max_delay=ms(5000))
        assert policy.get_delay(0) == ms(5000)
        assert policy.get_delay(3) == ms(5000)

    def test_frozen(self):
        """Policies are immutable."""
        policy = RetryPolicy()
        with pytest.raises(AttributeError):
            policy.max_retries = 5
