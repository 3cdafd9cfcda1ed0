"""Stock market data models (data.alpaca.markets /v2/stocks).

The market data API uses single-letter keys ("p", "ap", "o", ...); models
expose readable names and accept either form.
"""

from __future__ import annotations

from pydantic import Field

from .base import AlpacaModel


class Trade(AlpacaModel):
    price: float = Field(default=0.0, alias="p")
    size: int = Field(default=0, alias="s")
    exchange: str = Field(default="", alias="x")
    id: int = Field(default=0, alias="i")
    timestamp: str = Field(default="", alias="t")
    conditions: list[str] = Field(default_factory=list, alias="c")
    tape: str = Field(default="", alias="z")


class LatestTrade(AlpacaModel):
    symbol: str = ""
    trade: Trade = Field(default_factory=Trade)


class Quote(AlpacaModel):
    ask_price: float = Field(default=0.0, alias="ap")
    ask_size: int = Field(default=0, alias="as")
    ask_exchange: str = Field(default="", alias="ax")
    bid_price: float = Field(default=0.0, alias="bp")
    bid_size: int = Field(default=0, alias="bs")
    bid_exchange: str = Field(default="", alias="bx")
    timestamp: str = Field(default="", alias="t")
    conditions: list[str] = Field(default_factory=list, alias="c")
    tape: str = Field(default="", alias="z")


class LatestQuote(AlpacaModel):
    symbol: str = ""
    quote: Quote = Field(default_factory=Quote)


# Aliases kept for callers of the v1 "last" endpoints
LastTrade = LatestTrade
LastQuote = LatestQuote


class Bar(AlpacaModel):
    timestamp: str = Field(default="", alias="t")
    open_price: float = Field(default=0.0, alias="o")
    high_price: float = Field(default=0.0, alias="h")
    low_price: float = Field(default=0.0, alias="l")
    close_price: float = Field(default=0.0, alias="c")
    volume: int = Field(default=0, alias="v")
    trade_count: int = Field(default=0, alias="n")
    vwap: float = Field(default=0.0, alias="vw")


class Bars(AlpacaModel):
    """Bars keyed by symbol, one page of GET /v2/stocks/bars."""

    bars: dict[str, list[Bar]] = Field(default_factory=dict)
    next_page_token: str = ""


class Snapshot(AlpacaModel):
    latest_trade: Trade = Field(default_factory=Trade, alias="latestTrade")
    latest_quote: Quote = Field(default_factory=Quote, alias="latestQuote")
    minute_bar: Bar = Field(default_factory=Bar, alias="minuteBar")
    daily_bar: Bar = Field(default_factory=Bar, alias="dailyBar")
    prev_daily_bar: Bar = Field(default_factory=Bar, alias="prevDailyBar")


class TradesResponse(AlpacaModel):
    """One page of GET /v2/stocks/{symbol}/trades."""

    symbol: str = ""
    trades: list[Trade] = Field(default_factory=list)
    next_page_token: str = ""


class QuotesResponse(AlpacaModel):
    """One page of GET /v2/stocks/{symbol}/quotes."""

    symbol: str = ""
    quotes: list[Quote] = Field(default_factory=list)
    next_page_token: str = ""


class MultiTrades(AlpacaModel):
    """Trades keyed by symbol, one page of GET /v2/stocks/trades."""

    trades: dict[str, list[Trade]] = Field(default_factory=dict)
    next_page_token: str = ""


class MultiQuotes(AlpacaModel):
    """Quotes keyed by symbol, one page of GET /v2/stocks/quotes."""

    quotes: dict[str, list[Quote]] = Field(default_factory=dict)
    next_page_token: str = ""


class Auction(AlpacaModel):
    """An opening or closing auction print."""

    timestamp: str = Field(default="", alias="t")
    price: float = Field(default=0.0, alias="p")
    size: int = Field(default=0, alias="s")
    exchange: str = Field(default="", alias="x")
    condition: str = Field(default="", alias="c")


class SymbolAuctions(AlpacaModel):
    daily_auctions: list[Auction] = Field(default_factory=list, alias="d")


class Auctions(AlpacaModel):
    """Auctions keyed by symbol, one page of the auctions endpoints."""

    auctions: dict[str, SymbolAuctions] = Field(default_factory=dict)
    next_page_token: str = ""
