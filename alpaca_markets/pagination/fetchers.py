"""PageFetcher adapters for the paginated endpoints.

Each adapter stores a client and the call parameters, and per fetch
substitutes the iterator's page token. Client errors are returned inside
the FetchResult unchanged; the continuation token is copied verbatim.

Multi-symbol endpoints yield (symbol, item) pairs, grouped by symbol in the
order the API returned them.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from alpaca_markets.config.constants import (
    DEFAULT_MARKET_DATA_LIMIT,
    DEFAULT_NEWS_LIMIT,
    DEFAULT_OPTION_CONTRACTS_LIMIT,
)
from alpaca_markets.core.errors import AlpacaError
from alpaca_markets.core.types import FetchResult, Page
from alpaca_markets.models import (
    Auction,
    Bar,
    CorporateAction,
    CryptoBar,
    CryptoFeed,
    CryptoQuote,
    CryptoTrade,
    News,
    OptionContract,
    Quote,
    Trade,
)
from alpaca_markets.observability.logger import get_logger

from .iterator import PageIterator

if TYPE_CHECKING:
    from alpaca_markets.rest.client import Client

logger = get_logger(__name__)

T = TypeVar("T")
V = TypeVar("V")


def _flatten(grouped: Mapping[str, Iterable[V]]) -> list[tuple[str, V]]:
    return [(symbol, item) for symbol, items in grouped.items() for item in items]


def _timed_fetch(
    source: str,
    page_token: str,
    call: Callable[[], tuple[Iterable[T], str | None]],
) -> FetchResult[Page[T]]:
    """Run one page request, turning client errors into an error result."""
    start = time.monotonic()
    try:
        items, next_page_token = call()
    except AlpacaError as e:
        latency_ms = (time.monotonic() - start) * 1000
        logger.debug(f"{source} fetch failed: {e}", extra={"page_token": page_token})
        return FetchResult.failure(e, latency_ms=latency_ms, source=source)

    latency_ms = (time.monotonic() - start) * 1000
    return FetchResult.success(
        Page.of(items, next_page_token),
        latency_ms=latency_ms,
        source=source,
    )


class FunctionFetcher(Generic[T]):
    """Adapts a callable (page_token) -> (items, next_page_token)."""

    def __init__(
        self,
        func: Callable[[str], tuple[Iterable[T], str | None]],
        source: str = "",
    ) -> None:
        self.func = func
        self.source = source or getattr(func, "__name__", "function")

    def fetch(self, page_token: str) -> FetchResult[Page[T]]:
        return _timed_fetch(self.source, page_token, lambda: self.func(page_token))


# === Stocks ===


@dataclass(frozen=True)
class TradesFetcher:
    """Historical trades for one symbol (/v2/stocks/{symbol}/trades)."""

    client: Client
    symbol: str
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[Trade]]:
        return _timed_fetch(
            "trades",
            page_token,
            lambda: self.client.get_trades(self.symbol, self.start, self.end, self.limit, page_token),
        )


@dataclass(frozen=True)
class QuotesFetcher:
    """Historical quotes for one symbol (/v2/stocks/{symbol}/quotes)."""

    client: Client
    symbol: str
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[Quote]]:
        return _timed_fetch(
            "quotes",
            page_token,
            lambda: self.client.get_quotes(self.symbol, self.start, self.end, self.limit, page_token),
        )


@dataclass(frozen=True)
class BarsFetcher:
    """Historical bars for several symbols (/v2/stocks/bars)."""

    client: Client
    symbols: Sequence[str]
    start: str
    end: str
    timeframe: str = "1Day"
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, Bar]]]:
        def call() -> tuple[list[tuple[str, Bar]], str]:
            bars = self.client.get_bars(
                self.symbols, self.start, self.end, self.timeframe, self.limit, page_token
            )
            return _flatten(bars.bars), bars.next_page_token

        return _timed_fetch("bars", page_token, call)


@dataclass(frozen=True)
class MultiTradesFetcher:
    """Historical trades for several symbols (/v2/stocks/trades)."""

    client: Client
    symbols: Sequence[str]
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, Trade]]]:
        def call() -> tuple[list[tuple[str, Trade]], str]:
            page = self.client.get_multi_trades(self.symbols, self.start, self.end, self.limit, page_token)
            return _flatten(page.trades), page.next_page_token

        return _timed_fetch("multi_trades", page_token, call)


@dataclass(frozen=True)
class MultiQuotesFetcher:
    """Historical quotes for several symbols (/v2/stocks/quotes)."""

    client: Client
    symbols: Sequence[str]
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, Quote]]]:
        def call() -> tuple[list[tuple[str, Quote]], str]:
            page = self.client.get_multi_quotes(self.symbols, self.start, self.end, self.limit, page_token)
            return _flatten(page.quotes), page.next_page_token

        return _timed_fetch("multi_quotes", page_token, call)


@dataclass(frozen=True)
class AuctionsFetcher:
    """Daily auctions for one or more symbols.

    A single symbol uses /v2/stocks/{symbol}/auctions, several use
    /v2/stocks/auctions.
    """

    client: Client
    symbols: Sequence[str]
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, Auction]]]:
        def call() -> tuple[list[tuple[str, Auction]], str]:
            if len(self.symbols) == 1:
                page = self.client.get_auctions(self.symbols[0], self.start, self.end, self.limit, page_token)
            else:
                page = self.client.get_multi_auctions(self.symbols, self.start, self.end, self.limit, page_token)
            grouped = {symbol: auctions.daily_auctions for symbol, auctions in page.auctions.items()}
            return _flatten(grouped), page.next_page_token

        return _timed_fetch("auctions", page_token, call)


# === Reference data ===


@dataclass(frozen=True)
class NewsFetcher:
    """News articles (/v1beta1/news)."""

    client: Client
    symbols: Sequence[str] = ()
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_NEWS_LIMIT
    include_content: bool = False
    exclude_contentless: bool = False

    def fetch(self, page_token: str) -> FetchResult[Page[News]]:
        def call() -> tuple[list[News], str]:
            page = self.client.get_news(
                self.symbols,
                self.start,
                self.end,
                self.limit,
                page_token,
                self.include_content,
                self.exclude_contentless,
            )
            return page.news, page.next_page_token

        return _timed_fetch("news", page_token, call)


@dataclass(frozen=True)
class CorporateActionsFetcher:
    """Corporate actions (/v1beta1/corporate-actions)."""

    client: Client
    symbols: Sequence[str] = ()
    types: Sequence[str] = ()
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[CorporateAction]]:
        def call() -> tuple[list[CorporateAction], str]:
            page = self.client.get_corporate_actions(
                self.symbols, self.types, self.start, self.end, self.limit, page_token
            )
            return page.corporate_actions, page.next_page_token

        return _timed_fetch("corporate_actions", page_token, call)


@dataclass(frozen=True)
class OptionContractsFetcher:
    """Option contracts (/v2/options/contracts).

    Attributes:
        filters: Keyword filters of Client.get_option_contracts
            (underlying_symbols, expiration_date_gte, type, ...)
    """

    client: Client
    filters: Mapping[str, Any] = field(default_factory=dict)
    limit: int = DEFAULT_OPTION_CONTRACTS_LIMIT

    def fetch(self, page_token: str) -> FetchResult[Page[OptionContract]]:
        def call() -> tuple[list[OptionContract], str]:
            page = self.client.get_option_contracts(
                **self.filters, limit=self.limit, page_token=page_token
            )
            return page.option_contracts, page.next_page_token

        return _timed_fetch("option_contracts", page_token, call)


# === Crypto ===


@dataclass(frozen=True)
class CryptoBarsFetcher:
    client: Client
    symbols: Sequence[str]
    start: str = ""
    end: str = ""
    timeframe: str = "1Day"
    limit: int = DEFAULT_MARKET_DATA_LIMIT
    feed: CryptoFeed = CryptoFeed.US

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, CryptoBar]]]:
        def call() -> tuple[list[tuple[str, CryptoBar]], str]:
            page = self.client.get_crypto_bars(
                self.symbols, self.start, self.end, self.timeframe, self.limit, page_token, self.feed
            )
            return _flatten(page.bars), page.next_page_token

        return _timed_fetch("crypto_bars", page_token, call)


@dataclass(frozen=True)
class CryptoTradesFetcher:
    client: Client
    symbols: Sequence[str]
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT
    feed: CryptoFeed = CryptoFeed.US

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, CryptoTrade]]]:
        def call() -> tuple[list[tuple[str, CryptoTrade]], str]:
            page = self.client.get_crypto_trades(
                self.symbols, self.start, self.end, self.limit, page_token, self.feed
            )
            return _flatten(page.trades), page.next_page_token

        return _timed_fetch("crypto_trades", page_token, call)


@dataclass(frozen=True)
class CryptoQuotesFetcher:
    client: Client
    symbols: Sequence[str]
    start: str = ""
    end: str = ""
    limit: int = DEFAULT_MARKET_DATA_LIMIT
    feed: CryptoFeed = CryptoFeed.US

    def fetch(self, page_token: str) -> FetchResult[Page[tuple[str, CryptoQuote]]]:
        def call() -> tuple[list[tuple[str, CryptoQuote]], str]:
            page = self.client.get_crypto_quotes(
                self.symbols, self.start, self.end, self.limit, page_token, self.feed
            )
            return _flatten(page.quotes), page.next_page_token

        return _timed_fetch("crypto_quotes", page_token, call)


# === Iterator helpers ===


def make_trades_iterator(
    client: Client,
    symbol: str,
    start: str,
    end: str,
    limit: int = DEFAULT_MARKET_DATA_LIMIT,
) -> PageIterator[Trade]:
    """Iterate over every trade of a symbol between start and end."""
    return PageIterator(TradesFetcher(client, symbol, start, end, limit))


def make_quotes_iterator(
    client: Client,
    symbol: str,
    start: str,
    end: str,
    limit: int = DEFAULT_MARKET_DATA_LIMIT,
) -> PageIterator[Quote]:
    """Iterate over every quote of a symbol between start and end."""
    return PageIterator(QuotesFetcher(client, symbol, start, end, limit))
