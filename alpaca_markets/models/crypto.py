"""Crypto market data models (/v1beta3/crypto/{feed}).

Sizes and volumes are fractional for crypto, unlike their stock
counterparts.
"""

from __future__ import annotations

from pydantic import Field

from .base import AlpacaModel


class CryptoTrade(AlpacaModel):
    price: float = Field(default=0.0, alias="p")
    size: float = Field(default=0.0, alias="s")
    timestamp: str = Field(default="", alias="t")
    id: int = Field(default=0, alias="i")
    taker_side: str = Field(default="", alias="tks")  # "B" or "S"


class CryptoQuote(AlpacaModel):
    ask_price: float = Field(default=0.0, alias="ap")
    ask_size: float = Field(default=0.0, alias="as")
    bid_price: float = Field(default=0.0, alias="bp")
    bid_size: float = Field(default=0.0, alias="bs")
    timestamp: str = Field(default="", alias="t")


class CryptoBar(AlpacaModel):
    timestamp: str = Field(default="", alias="t")
    open_price: float = Field(default=0.0, alias="o")
    high_price: float = Field(default=0.0, alias="h")
    low_price: float = Field(default=0.0, alias="l")
    close_price: float = Field(default=0.0, alias="c")
    volume: float = Field(default=0.0, alias="v")
    trade_count: int = Field(default=0, alias="n")
    vwap: float = Field(default=0.0, alias="vw")


class CryptoSnapshot(AlpacaModel):
    latest_trade: CryptoTrade = Field(default_factory=CryptoTrade, alias="latestTrade")
    latest_quote: CryptoQuote = Field(default_factory=CryptoQuote, alias="latestQuote")
    minute_bar: CryptoBar = Field(default_factory=CryptoBar, alias="minuteBar")
    daily_bar: CryptoBar = Field(default_factory=CryptoBar, alias="dailyBar")
    prev_daily_bar: CryptoBar = Field(default_factory=CryptoBar, alias="prevDailyBar")


class CryptoTrades(AlpacaModel):
    trades: dict[str, list[CryptoTrade]] = Field(default_factory=dict)
    next_page_token: str = ""


class CryptoQuotes(AlpacaModel):
    quotes: dict[str, list[CryptoQuote]] = Field(default_factory=dict)
    next_page_token: str = ""


class CryptoBars(AlpacaModel):
    bars: dict[str, list[CryptoBar]] = Field(default_factory=dict)
    next_page_token: str = ""
