"""Alpaca REST API client.

One method per endpoint of the trading API (api / paper-api.alpaca.markets)
and the market data API (data.alpaca.markets). Every method returns typed
models and raises AlpacaError subclasses on failure.

Usage:
    from alpaca_markets import Client, load_environment

    with Client(load_environment()) as client:
        clock = client.get_clock()
        trades, token = client.get_trades("AAPL", start="2024-01-02T00:00:00Z")
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from alpaca_markets.config.constants import (
    DEFAULT_MARKET_DATA_LIMIT,
    DEFAULT_NEWS_LIMIT,
    DEFAULT_OPTION_CONTRACTS_LIMIT,
    DEFAULT_ORDERS_LIMIT,
)
from alpaca_markets.config.settings import Environment, TimeoutConfig
from alpaca_markets.core.errors import DataNotFoundError, ParseError
from alpaca_markets.models import (
    Account,
    AccountConfigurations,
    ActionStatus,
    Activity,
    Announcement,
    AnnouncementDateType,
    AnnouncementType,
    Asset,
    AssetClass,
    Auctions,
    Bar,
    Bars,
    CancelledOrder,
    Clock,
    ClosedPosition,
    CorporateActions,
    CryptoBar,
    CryptoBars,
    CryptoFeed,
    CryptoQuote,
    CryptoQuotes,
    CryptoSnapshot,
    CryptoTrade,
    CryptoTrades,
    Date,
    LatestQuote,
    LatestTrade,
    MultiQuotes,
    MultiTrades,
    NewsArticles,
    OptionContract,
    OptionContracts,
    Order,
    OrderClass,
    OrderDirection,
    OrderSide,
    OrderTimeInForce,
    OrderType,
    PortfolioHistory,
    Position,
    Quote,
    QuotesResponse,
    Snapshot,
    Trade,
    TradesResponse,
    Watchlist,
    parse_activities,
    parse_list,
    parse_mapping,
)
from alpaca_markets.models.base import AlpacaModel
from alpaca_markets.observability.logger import get_logger
from alpaca_markets.resilience.retry import RetryPolicy

from .transport import RestTransport, Sleeper

logger = get_logger(__name__)


@dataclass(frozen=True)
class TakeProfitParams:
    """Take-profit leg of a bracket order."""

    limit_price: str = ""


@dataclass(frozen=True)
class StopLossParams:
    """Stop-loss leg of a bracket order."""

    stop_price: str = ""
    limit_price: str = ""


def _non_empty(**fields: Any) -> dict[str, Any]:
    """Keep only fields that carry a value (drops "", None and False)."""
    return {k: v for k, v in fields.items() if v not in ("", None, False)}


def _positive_limit(limit: int) -> int | None:
    """Page size to send; 0 or less leaves the server default."""
    return limit if limit > 0 else None


def _crypto_path(feed: CryptoFeed, path: str) -> str:
    return f"/v1beta3/crypto/{CryptoFeed(feed).value}{path}"


def _member(payload: Any, key: str) -> Any:
    """payload[key] of a JSON object response; ParseError for any other shape."""
    if not isinstance(payload, dict):
        raise ParseError(f"Deserialized valid JSON but it wasn't an object with \"{key}\"", field=key)
    return payload.get(key)


def _symbol_entry(payload: Any, key: str, symbol: str, model: type[AlpacaModel], what: str) -> Any:
    """Pick payload[key][symbol] out of a multi-symbol response."""
    entries = payload.get(key) if isinstance(payload, dict) else None
    if not isinstance(entries, dict) or not isinstance(entries.get(symbol), dict):
        raise DataNotFoundError(f"{what} not found for symbol", symbol=symbol)
    return model.from_json(entries[symbol])


class Client:
    """Client for the Alpaca trading and market data REST APIs.

    Configuration is explicit: pass an Environment (see load_environment)
    and optionally a RetryPolicy and TimeoutConfig.
    """

    def __init__(
        self,
        environment: Environment,
        *,
        retry_policy: RetryPolicy | None = None,
        timeouts: TimeoutConfig | None = None,
        sleeper: Sleeper = time.sleep,
        trading_http: httpx.Client | None = None,
        data_http: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            environment: Credentials and base URLs
            retry_policy: Backoff policy for 429/5xx (default: RetryPolicy())
            timeouts: Request timeouts (default: TimeoutConfig())
            sleeper: Sleep function used between retries
            trading_http: httpx client for the trading API (optional)
            data_http: httpx client for the market data API (optional)
        """
        self.environment = environment
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeouts = timeouts or TimeoutConfig()

        self.trading = RestTransport(
            environment.trading_base_url,
            environment,
            retry_policy=self.retry_policy,
            timeouts=self.timeouts,
            sleeper=sleeper,
            http_client=trading_http,
        )
        self.data = RestTransport(
            environment.data_base_url,
            environment,
            retry_policy=self.retry_policy,
            timeouts=self.timeouts,
            sleeper=sleeper,
            http_client=data_http,
        )

    def close(self) -> None:
        self.trading.close()
        self.data.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # ==================== Account ====================

    def get_account(self) -> Account:
        return Account.from_json(self.trading.get("/v2/account"))

    def get_account_configurations(self) -> AccountConfigurations:
        return AccountConfigurations.from_json(self.trading.get("/v2/account/configurations"))

    def update_account_configurations(
        self,
        no_shorting: bool,
        dtbp_check: str,
        trade_confirm_email: str,
        suspend_trade: bool,
    ) -> AccountConfigurations:
        body = {
            "no_shorting": no_shorting,
            "dtbp_check": dtbp_check,
            "trade_confirm_email": trade_confirm_email,
            "suspend_trade": suspend_trade,
        }
        return AccountConfigurations.from_json(self.trading.patch("/v2/account/configurations", json=body))

    def get_account_activity(self, activity_types: Sequence[str] = ()) -> list[Activity]:
        """Account activities, each decoded as TradeActivity or NonTradeActivity.

        Args:
            activity_types: Filter such as ["FILL", "DIV"] (default: all)
        """
        payload = self.trading.get("/v2/account/activities", {"activity_types": list(activity_types)})
        return parse_activities(payload)

    # ==================== Orders ====================

    def get_orders(
        self,
        status: ActionStatus = ActionStatus.OPEN,
        limit: int = DEFAULT_ORDERS_LIMIT,
        after: str = "",
        until: str = "",
        direction: OrderDirection = OrderDirection.DESCENDING,
        nested: bool = False,
    ) -> list[Order]:
        params = {
            "status": status,
            "limit": limit,
            "after": after,
            "until": until,
            "direction": direction,
            "nested": nested,
        }
        return parse_list(Order, self.trading.get("/v2/orders", params))

    def get_order(self, id: str, nested: bool = False) -> Order:
        return Order.from_json(self.trading.get(f"/v2/orders/{id}", {"nested": nested}))

    def get_order_by_client_order_id(self, client_order_id: str) -> Order:
        payload = self.trading.get(
            "/v2/orders:by_client_order_id",
            {"client_order_id": client_order_id},
        )
        return Order.from_json(payload)

    def submit_order(
        self,
        symbol: str,
        qty: int,
        side: OrderSide,
        type: OrderType,
        time_in_force: OrderTimeInForce,
        limit_price: str = "",
        stop_price: str = "",
        extended_hours: bool = False,
        client_order_id: str = "",
        order_class: OrderClass = OrderClass.SIMPLE,
        take_profit: TakeProfitParams | None = None,
        stop_loss: StopLossParams | None = None,
        trail_price: str = "",
        trail_percent: str = "",
    ) -> Order:
        """Submit a quantity-based order.

        Bracket, OCO and OTO orders take their legs from take_profit and
        stop_loss; simple orders omit order_class from the request.
        """
        body: dict[str, Any] = {
            "symbol": symbol,
            "qty": qty,
            "side": OrderSide(side).value,
            "type": OrderType(type).value,
            "time_in_force": OrderTimeInForce(time_in_force).value,
        }
        body.update(
            _non_empty(
                limit_price=limit_price,
                stop_price=stop_price,
                trail_price=trail_price,
                trail_percent=trail_percent,
                extended_hours=extended_hours,
                client_order_id=client_order_id,
            )
        )
        if OrderClass(order_class) is not OrderClass.SIMPLE:
            body["order_class"] = OrderClass(order_class).value
        if take_profit is not None:
            body["take_profit"] = _non_empty(limit_price=take_profit.limit_price)
        if stop_loss is not None:
            body["stop_loss"] = _non_empty(
                limit_price=stop_loss.limit_price,
                stop_price=stop_loss.stop_price,
            )

        logger.info(f"Submitting {body['side']} {body['type']} order for {symbol}")
        return Order.from_json(self.trading.post("/v2/orders", json=body))

    def submit_notional_order(
        self,
        symbol: str,
        notional: str,
        side: OrderSide,
        type: OrderType,
        time_in_force: OrderTimeInForce,
        limit_price: str = "",
        extended_hours: bool = False,
        client_order_id: str = "",
    ) -> Order:
        """Submit a dollar-amount order (fractional shares)."""
        body: dict[str, Any] = {
            "symbol": symbol,
            "notional": notional,
            "side": OrderSide(side).value,
            "type": OrderType(type).value,
            "time_in_force": OrderTimeInForce(time_in_force).value,
        }
        body.update(
            _non_empty(
                limit_price=limit_price,
                extended_hours=extended_hours,
                client_order_id=client_order_id,
            )
        )

        logger.info(f"Submitting {body['side']} notional order for {symbol}")
        return Order.from_json(self.trading.post("/v2/orders", json=body))

    def replace_order(
        self,
        id: str,
        qty: int,
        time_in_force: OrderTimeInForce,
        limit_price: str = "",
        stop_price: str = "",
        client_order_id: str = "",
    ) -> Order:
        body: dict[str, Any] = {
            "qty": qty,
            "time_in_force": OrderTimeInForce(time_in_force).value,
        }
        body.update(
            _non_empty(
                limit_price=limit_price,
                stop_price=stop_price,
                client_order_id=client_order_id,
            )
        )
        return Order.from_json(self.trading.patch(f"/v2/orders/{id}", json=body))

    def cancel_orders(self) -> list[CancelledOrder]:
        """Cancel all open orders; one result per order (HTTP 207 multi-status)."""
        return parse_list(CancelledOrder, self.trading.delete("/v2/orders") or [])

    def cancel_order(self, id: str) -> Order:
        """Cancel one order and return its updated state."""
        payload = self.trading.delete(f"/v2/orders/{id}")
        if payload is None:
            # 204 No Content: read the order back
            return self.get_order(id)
        return Order.from_json(payload)

    # ==================== Positions ====================

    def get_positions(self) -> list[Position]:
        return parse_list(Position, self.trading.get("/v2/positions"))

    def get_position(self, symbol: str) -> Position:
        return Position.from_json(self.trading.get(f"/v2/positions/{symbol}"))

    def close_positions(self) -> list[ClosedPosition]:
        return parse_list(ClosedPosition, self.trading.delete("/v2/positions") or [])

    def close_position(self, symbol: str) -> Order:
        """Liquidate one position; returns the closing order."""
        return Order.from_json(self.trading.delete(f"/v2/positions/{symbol}"))

    # ==================== Assets ====================

    def get_assets(
        self,
        status: ActionStatus = ActionStatus.ACTIVE,
        asset_class: AssetClass = AssetClass.US_EQUITY,
    ) -> list[Asset]:
        params = {"status": status, "asset_class": asset_class}
        return parse_list(Asset, self.trading.get("/v2/assets", params))

    def get_asset(self, symbol: str) -> Asset:
        return Asset.from_json(self.trading.get(f"/v2/assets/{symbol}"))

    # ==================== Clock & Calendar ====================

    def get_clock(self) -> Clock:
        return Clock.from_json(self.trading.get("/v2/clock"))

    def get_calendar(self, start: str, end: str) -> list[Date]:
        return parse_list(Date, self.trading.get("/v2/calendar", {"start": start, "end": end}))

    # ==================== Watchlists ====================

    def get_watchlists(self) -> list[Watchlist]:
        return parse_list(Watchlist, self.trading.get("/v2/watchlists"))

    def get_watchlist(self, id: str) -> Watchlist:
        return Watchlist.from_json(self.trading.get(f"/v2/watchlists/{id}"))

    def create_watchlist(self, name: str, symbols: Sequence[str]) -> Watchlist:
        body = {"name": name, "symbols": list(symbols)}
        return Watchlist.from_json(self.trading.post("/v2/watchlists", json=body))

    def update_watchlist(self, id: str, name: str, symbols: Sequence[str]) -> Watchlist:
        body = {"name": name, "symbols": list(symbols)}
        return Watchlist.from_json(self.trading.put(f"/v2/watchlists/{id}", json=body))

    def delete_watchlist(self, id: str) -> None:
        self.trading.delete(f"/v2/watchlists/{id}")

    def add_symbol_to_watchlist(self, id: str, symbol: str) -> Watchlist:
        payload = self.trading.post(f"/v2/watchlists/{id}", json={"symbol": symbol})
        return Watchlist.from_json(payload)

    def remove_symbol_from_watchlist(self, id: str, symbol: str) -> Watchlist:
        return Watchlist.from_json(self.trading.delete(f"/v2/watchlists/{id}/{symbol}"))

    # ==================== Portfolio ====================

    def get_portfolio_history(
        self,
        period: str = "",
        timeframe: str = "",
        date_end: str = "",
        extended_hours: bool = False,
    ) -> PortfolioHistory:
        params = {
            "period": period,
            "timeframe": timeframe,
            "date_end": date_end,
            "extended_hours": extended_hours,
        }
        return PortfolioHistory.from_json(self.trading.get("/v2/account/portfolio/history", params))

    # ==================== Market Data: Stocks ====================

    def get_bars(
        self,
        symbols: Sequence[str],
        start: str,
        end: str,
        timeframe: str = "1Day",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> Bars:
        params = {
            "symbols": list(symbols),
            "timeframe": timeframe,
            "limit": _positive_limit(limit),
            "start": start,
            "end": end,
            "page_token": page_token,
        }
        return Bars.from_json(self.data.get("/v2/stocks/bars", params))

    def get_latest_trade(self, symbol: str) -> LatestTrade:
        return LatestTrade.from_json(self.data.get(f"/v2/stocks/{symbol}/trades/latest"))

    def get_latest_quote(self, symbol: str) -> LatestQuote:
        return LatestQuote.from_json(self.data.get(f"/v2/stocks/{symbol}/quotes/latest"))

    # v1 names for the latest trade / quote lookups
    get_last_trade = get_latest_trade
    get_last_quote = get_latest_quote

    def get_latest_trades(self, symbols: Sequence[str]) -> dict[str, Trade]:
        payload = self.data.get("/v2/stocks/trades/latest", {"symbols": list(symbols)})
        return parse_mapping(Trade, _member(payload, "trades"))

    def get_latest_quotes(self, symbols: Sequence[str]) -> dict[str, Quote]:
        payload = self.data.get("/v2/stocks/quotes/latest", {"symbols": list(symbols)})
        return parse_mapping(Quote, _member(payload, "quotes"))

    def get_latest_bar(self, symbol: str) -> Bar:
        payload = self.data.get(f"/v2/stocks/{symbol}/bars/latest")
        return Bar.from_json(_member(payload, "bar") or {})

    def get_latest_bars(self, symbols: Sequence[str]) -> dict[str, Bar]:
        payload = self.data.get("/v2/stocks/bars/latest", {"symbols": list(symbols)})
        return parse_mapping(Bar, _member(payload, "bars"))

    def get_snapshot(self, symbol: str) -> Snapshot:
        return Snapshot.from_json(self.data.get(f"/v2/stocks/{symbol}/snapshot"))

    def get_snapshots(self, symbols: Sequence[str]) -> dict[str, Snapshot]:
        # Keyed by symbol at the top level
        payload = self.data.get("/v2/stocks/snapshots", {"symbols": list(symbols)})
        return parse_mapping(Snapshot, payload)

    def get_trades(
        self,
        symbol: str,
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> tuple[list[Trade], str]:
        """One page of historical trades.

        Returns:
            (trades, next_page_token); the token is "" on the last page
        """
        params = {"start": start, "end": end, "limit": _positive_limit(limit), "page_token": page_token}
        response = TradesResponse.from_json(self.data.get(f"/v2/stocks/{symbol}/trades", params))
        return list(response.trades), response.next_page_token

    def get_quotes(
        self,
        symbol: str,
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> tuple[list[Quote], str]:
        """One page of historical quotes.

        Returns:
            (quotes, next_page_token); the token is "" on the last page
        """
        params = {"start": start, "end": end, "limit": _positive_limit(limit), "page_token": page_token}
        response = QuotesResponse.from_json(self.data.get(f"/v2/stocks/{symbol}/quotes", params))
        return list(response.quotes), response.next_page_token

    def get_multi_trades(
        self,
        symbols: Sequence[str],
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> MultiTrades:
        params = {
            "symbols": list(symbols),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return MultiTrades.from_json(self.data.get("/v2/stocks/trades", params))

    def get_multi_quotes(
        self,
        symbols: Sequence[str],
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> MultiQuotes:
        params = {
            "symbols": list(symbols),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return MultiQuotes.from_json(self.data.get("/v2/stocks/quotes", params))

    def get_auctions(
        self,
        symbol: str,
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> Auctions:
        params = {"start": start, "end": end, "limit": _positive_limit(limit), "page_token": page_token}
        return Auctions.from_json(self.data.get(f"/v2/stocks/{symbol}/auctions", params))

    def get_multi_auctions(
        self,
        symbols: Sequence[str],
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> Auctions:
        params = {
            "symbols": list(symbols),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return Auctions.from_json(self.data.get("/v2/stocks/auctions", params))

    # ==================== Corporate Actions ====================

    def get_announcements(
        self,
        ca_types: Sequence[AnnouncementType | str] = (),
        since: str = "",
        until: str = "",
        symbol: str = "",
        cusip: str = "",
        date_type: AnnouncementDateType | str = "",
    ) -> list[Announcement]:
        params = {
            "ca_types": list(ca_types),
            "since": since,
            "until": until,
            "symbol": symbol,
            "cusip": cusip,
            "date_type": date_type,
        }
        return parse_list(Announcement, self.trading.get("/v2/corporate_actions/announcements", params))

    def get_announcement(self, id: str) -> Announcement:
        return Announcement.from_json(self.trading.get(f"/v2/corporate_actions/announcements/{id}"))

    def get_corporate_actions(
        self,
        symbols: Sequence[str] = (),
        types: Sequence[str] = (),
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
    ) -> CorporateActions:
        params = {
            "symbols": list(symbols),
            "types": list(types),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return CorporateActions.from_json(self.data.get("/v1beta1/corporate-actions", params))

    # ==================== Options ====================

    def get_option_contracts(
        self,
        underlying_symbols: str = "",
        status: str = "",
        expiration_date: str = "",
        expiration_date_gte: str = "",
        expiration_date_lte: str = "",
        root_symbol: str = "",
        type: str = "",
        style: str = "",
        strike_price_gte: str = "",
        strike_price_lte: str = "",
        limit: int = DEFAULT_OPTION_CONTRACTS_LIMIT,
        page_token: str = "",
    ) -> OptionContracts:
        params = {
            "underlying_symbols": underlying_symbols,
            "status": status,
            "expiration_date": expiration_date,
            "expiration_date_gte": expiration_date_gte,
            "expiration_date_lte": expiration_date_lte,
            "root_symbol": root_symbol,
            "type": type,
            "style": style,
            "strike_price_gte": strike_price_gte,
            "strike_price_lte": strike_price_lte,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return OptionContracts.from_json(self.trading.get("/v2/options/contracts", params))

    def get_option_contract(self, symbol_or_id: str) -> OptionContract:
        return OptionContract.from_json(self.trading.get(f"/v2/options/contracts/{symbol_or_id}"))

    # ==================== News ====================

    def get_news(
        self,
        symbols: Sequence[str] = (),
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_NEWS_LIMIT,
        page_token: str = "",
        include_content: bool = False,
        exclude_contentless: bool = False,
    ) -> NewsArticles:
        params = {
            "symbols": list(symbols),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
            "include_content": include_content,
            "exclude_contentless": exclude_contentless,
        }
        return NewsArticles.from_json(self.data.get("/v1beta1/news", params))

    # ==================== Market Data: Crypto ====================

    def get_latest_crypto_trade(self, symbol: str, feed: CryptoFeed = CryptoFeed.US) -> CryptoTrade:
        payload = self.data.get(_crypto_path(feed, "/latest/trades"), {"symbols": symbol})
        return _symbol_entry(payload, "trades", symbol, CryptoTrade, "Trade")

    def get_latest_crypto_trades(
        self, symbols: Sequence[str], feed: CryptoFeed = CryptoFeed.US
    ) -> dict[str, CryptoTrade]:
        payload = self.data.get(_crypto_path(feed, "/latest/trades"), {"symbols": list(symbols)})
        return parse_mapping(CryptoTrade, _member(payload, "trades"))

    def get_latest_crypto_quote(self, symbol: str, feed: CryptoFeed = CryptoFeed.US) -> CryptoQuote:
        payload = self.data.get(_crypto_path(feed, "/latest/quotes"), {"symbols": symbol})
        return _symbol_entry(payload, "quotes", symbol, CryptoQuote, "Quote")

    def get_latest_crypto_quotes(
        self, symbols: Sequence[str], feed: CryptoFeed = CryptoFeed.US
    ) -> dict[str, CryptoQuote]:
        payload = self.data.get(_crypto_path(feed, "/latest/quotes"), {"symbols": list(symbols)})
        return parse_mapping(CryptoQuote, _member(payload, "quotes"))

    def get_latest_crypto_bar(self, symbol: str, feed: CryptoFeed = CryptoFeed.US) -> CryptoBar:
        payload = self.data.get(_crypto_path(feed, "/latest/bars"), {"symbols": symbol})
        return _symbol_entry(payload, "bars", symbol, CryptoBar, "Bar")

    def get_latest_crypto_bars(
        self, symbols: Sequence[str], feed: CryptoFeed = CryptoFeed.US
    ) -> dict[str, CryptoBar]:
        payload = self.data.get(_crypto_path(feed, "/latest/bars"), {"symbols": list(symbols)})
        return parse_mapping(CryptoBar, _member(payload, "bars"))

    def get_crypto_snapshot(self, symbol: str, feed: CryptoFeed = CryptoFeed.US) -> CryptoSnapshot:
        payload = self.data.get(_crypto_path(feed, "/snapshots"), {"symbols": symbol})
        return _symbol_entry(payload, "snapshots", symbol, CryptoSnapshot, "Snapshot")

    def get_crypto_snapshots(
        self, symbols: Sequence[str], feed: CryptoFeed = CryptoFeed.US
    ) -> dict[str, CryptoSnapshot]:
        payload = self.data.get(_crypto_path(feed, "/snapshots"), {"symbols": list(symbols)})
        return parse_mapping(CryptoSnapshot, _member(payload, "snapshots"))

    def get_crypto_bars(
        self,
        symbols: Sequence[str],
        start: str = "",
        end: str = "",
        timeframe: str = "1Day",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
        feed: CryptoFeed = CryptoFeed.US,
    ) -> CryptoBars:
        params = {
            "symbols": list(symbols),
            "timeframe": timeframe,
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return CryptoBars.from_json(self.data.get(_crypto_path(feed, "/bars"), params))

    def get_crypto_trades(
        self,
        symbols: Sequence[str],
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
        feed: CryptoFeed = CryptoFeed.US,
    ) -> CryptoTrades:
        params = {
            "symbols": list(symbols),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return CryptoTrades.from_json(self.data.get(_crypto_path(feed, "/trades"), params))

    def get_crypto_quotes(
        self,
        symbols: Sequence[str],
        start: str = "",
        end: str = "",
        limit: int = DEFAULT_MARKET_DATA_LIMIT,
        page_token: str = "",
        feed: CryptoFeed = CryptoFeed.US,
    ) -> CryptoQuotes:
        params = {
            "symbols": list(symbols),
            "start": start,
            "end": end,
            "limit": _positive_limit(limit),
            "page_token": page_token,
        }
        return CryptoQuotes.from_json(self.data.get(_crypto_path(feed, "/quotes"), params))
