"""Cursor-based pagination over the Alpaca market data endpoints."""

from .fetchers import (
    AuctionsFetcher,
    BarsFetcher,
    CorporateActionsFetcher,
    CryptoBarsFetcher,
    CryptoQuotesFetcher,
    CryptoTradesFetcher,
    FunctionFetcher,
    MultiQuotesFetcher,
    MultiTradesFetcher,
    NewsFetcher,
    OptionContractsFetcher,
    QuotesFetcher,
    TradesFetcher,
    make_quotes_iterator,
    make_trades_iterator,
)
from .iterator import PageFetcher, PageIterator

__all__ = [
    "PageFetcher",
    "PageIterator",
    "FunctionFetcher",
    "TradesFetcher",
    "QuotesFetcher",
    "BarsFetcher",
    "MultiTradesFetcher",
    "MultiQuotesFetcher",
    "AuctionsFetcher",
    "NewsFetcher",
    "CorporateActionsFetcher",
    "OptionContractsFetcher",
    "CryptoBarsFetcher",
    "CryptoTradesFetcher",
    "CryptoQuotesFetcher",
    "make_trades_iterator",
    "make_quotes_iterator",
]
