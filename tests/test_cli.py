"""Tests for alpaca_markets/cli/main.py."""

import pytest
from typer.testing import CliRunner

from alpaca_markets.cli import main
from alpaca_markets.cli.main import app

from .fixtures.responses import (
    ACCOUNT_RESPONSE,
    ACCOUNT_RESPONSE_BLOCKED,
    CLOCK_RESPONSE,
    LATEST_QUOTE_RESPONSE,
    LATEST_TRADE_RESPONSE,
    TRADES_PAGE_1,
    TRADES_PAGE_2,
)

runner = CliRunner()


@pytest.fixture
def use_client(monkeypatch, client):
    """Point the CLI at the mocked API client."""
    monkeypatch.setattr(main, "_build_client", lambda: client)
    return client


class TestClock:
    def test_open_market(self, use_client, api):
        api.add("GET", "/v2/clock", CLOCK_RESPONSE)

        result = runner.invoke(app, ["clock"])

        assert result.exit_code == 0
        assert "Market is currently OPEN" in result.output
        assert "Next close: 2024-01-02T16:00:00-05:00" in result.output

    def test_closed_market(self, use_client, api):
        api.add("GET", "/v2/clock", {**CLOCK_RESPONSE, "is_open": False})

        result = runner.invoke(app, ["clock"])

        assert "CLOSED" in result.output


class TestQuote:
    def test_prints_quote_and_trade(self, use_client, api):
        api.add("GET", "/v2/stocks/AAPL/quotes/latest", LATEST_QUOTE_RESPONSE)
        api.add("GET", "/v2/stocks/AAPL/trades/latest", LATEST_TRADE_RESPONSE)

        result = runner.invoke(app, ["quote", "aapl"])

        assert result.exit_code == 0
        assert "Bid: $187.1 x 2" in result.output
        assert "Ask: $187.2 x 3" in result.output
        assert "Price: $187.15" in result.output

    def test_api_error_exit_code(self, use_client, api):
        api.add("GET", "/v2/stocks/ZZZZ/quotes/latest", {"code": 40410000, "message": "not found"}, status=404)

        result = runner.invoke(app, ["quote", "ZZZZ"])

        assert result.exit_code == 1
        assert "Error getting latest data for ZZZZ" in result.output


class TestAccount:
    def test_account_summary(self, use_client, api):
        api.add("GET", "/v2/account", ACCOUNT_RESPONSE)

        result = runner.invoke(app, ["account"])

        assert result.exit_code == 0
        assert "$262113.632" in result.output
        assert "restricted" not in result.output

    def test_blocked_account_notice(self, use_client, api):
        api.add("GET", "/v2/account", ACCOUNT_RESPONSE_BLOCKED)

        result = runner.invoke(app, ["account"])

        assert "Account is currently restricted from trading." in result.output

    def test_rate_limited_exit_code(self, use_client, api):
        api.add("GET", "/v2/account", {"code": 42910000, "message": "rate limit exceeded"}, status=429)

        result = runner.invoke(app, ["account"])

        assert result.exit_code == 2

    def test_missing_credentials(self, monkeypatch):
        """Without credentials the CLI reports the missing variable."""
        monkeypatch.setattr(main, "load_dotenv", lambda: False)

        result = runner.invoke(app, ["account"])

        assert result.exit_code == 1
        assert "APCA_API_KEY_ID" in result.output


class TestTrades:
    def test_counts_pages(self, use_client, api):
        api.add("GET", "/v2/stocks/AAPL/trades", TRADES_PAGE_1)
        api.add("GET", "/v2/stocks/AAPL/trades", TRADES_PAGE_2)

        result = runner.invoke(app, ["trades", "AAPL", "--start", "2024-01-02T14:30:00Z"])

        assert result.exit_code == 0
        assert "3 trades for AAPL in 2 page(s)" in result.output

    def test_max_pages(self, use_client, api):
        api.add("GET", "/v2/stocks/AAPL/trades", TRADES_PAGE_1)

        result = runner.invoke(app, ["trades", "AAPL", "--max-pages", "1"])

        assert "2 trades for AAPL in 1 page(s)" in result.output
        assert "More pages available." in result.output
