"""Typed models for Alpaca API payloads."""

from .account import (
    Account,
    AccountConfigurations,
    Activity,
    NonTradeActivity,
    TradeActivity,
    parse_activities,
    parse_activity,
)
from .base import AlpacaModel, parse_list, parse_mapping
from .crypto import (
    CryptoBar,
    CryptoBars,
    CryptoQuote,
    CryptoQuotes,
    CryptoSnapshot,
    CryptoTrade,
    CryptoTrades,
)
from .enums import (
    ActionStatus,
    ActivityKind,
    AnnouncementDateType,
    AnnouncementType,
    AssetClass,
    CryptoFeed,
    OptionStatus,
    OptionStyle,
    OptionType,
    OrderClass,
    OrderDirection,
    OrderSide,
    OrderTimeInForce,
    OrderType,
    PositionIntent,
)
from .market_data import (
    Auction,
    Auctions,
    Bar,
    Bars,
    LastQuote,
    LastTrade,
    LatestQuote,
    LatestTrade,
    MultiQuotes,
    MultiTrades,
    Quote,
    QuotesResponse,
    Snapshot,
    SymbolAuctions,
    Trade,
    TradesResponse,
)
from .reference import (
    Announcement,
    CorporateAction,
    CorporateActions,
    Deliverable,
    News,
    NewsArticles,
    NewsImage,
    OptionContract,
    OptionContracts,
)
from .trading import (
    Asset,
    CancelledOrder,
    Clock,
    ClosedPosition,
    Date,
    Order,
    PortfolioHistory,
    Position,
    Watchlist,
)

__all__ = [
    # Base
    "AlpacaModel",
    "parse_list",
    "parse_mapping",
    # Enums
    "ActionStatus",
    "ActivityKind",
    "AnnouncementDateType",
    "AnnouncementType",
    "AssetClass",
    "CryptoFeed",
    "OptionStatus",
    "OptionStyle",
    "OptionType",
    "OrderClass",
    "OrderDirection",
    "OrderSide",
    "OrderTimeInForce",
    "OrderType",
    "PositionIntent",
    # Account
    "Account",
    "AccountConfigurations",
    "Activity",
    "TradeActivity",
    "NonTradeActivity",
    "parse_activity",
    "parse_activities",
    # Trading
    "Asset",
    "CancelledOrder",
    "Clock",
    "ClosedPosition",
    "Date",
    "Order",
    "PortfolioHistory",
    "Position",
    "Watchlist",
    # Market data
    "Trade",
    "LatestTrade",
    "LastTrade",
    "Quote",
    "LatestQuote",
    "LastQuote",
    "Bar",
    "Bars",
    "Snapshot",
    "TradesResponse",
    "QuotesResponse",
    "MultiTrades",
    "MultiQuotes",
    "Auction",
    "SymbolAuctions",
    "Auctions",
    # Reference data
    "Announcement",
    "CorporateAction",
    "CorporateActions",
    "News",
    "NewsArticles",
    "NewsImage",
    "Deliverable",
    "OptionContract",
    "OptionContracts",
    # Crypto
    "CryptoTrade",
    "CryptoQuote",
    "CryptoBar",
    "CryptoSnapshot",
    "CryptoTrades",
    "CryptoQuotes",
    "CryptoBars",
]
