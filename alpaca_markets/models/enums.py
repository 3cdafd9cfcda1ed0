"""Request enums rendered to their wire strings."""

from enum import Enum


class ActionStatus(str, Enum):
    """Status filter for orders and assets."""

    OPEN = "open"
    CLOSED = "closed"
    ACTIVE = "active"
    ALL = "all"


class OrderDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class OrderSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"
    STOP_LIMIT = "stop_limit"
    TRAILING_STOP = "trailing_stop"


class OrderTimeInForce(str, Enum):
    DAY = "day"
    GOOD_UNTIL_CANCELED = "gtc"
    OPG = "opg"
    CLS = "cls"
    IMMEDIATE_OR_CANCEL = "ioc"
    FILL_OR_KILL = "fok"


class OrderClass(str, Enum):
    SIMPLE = "simple"
    BRACKET = "bracket"
    ONE_CANCELS_OTHER = "oco"
    ONE_TRIGGERS_OTHER = "oto"
    MULTI_LEG = "mleg"


class PositionIntent(str, Enum):
    """Intent of an options order leg."""

    BUY_TO_OPEN = "buy_to_open"
    BUY_TO_CLOSE = "buy_to_close"
    SELL_TO_OPEN = "sell_to_open"
    SELL_TO_CLOSE = "sell_to_close"


class AssetClass(str, Enum):
    US_EQUITY = "us_equity"
    CRYPTO = "crypto"


class CryptoFeed(str, Enum):
    """Crypto market data feed (path segment of /v1beta3/crypto/{feed})."""

    US = "us"
    GLOBAL = "global"


class AnnouncementType(str, Enum):
    DIVIDEND = "dividend"
    MERGER = "merger"
    SPINOFF = "spinoff"
    SPLIT = "split"


class AnnouncementDateType(str, Enum):
    DECLARATION_DATE = "declaration_date"
    RECORD_DATE = "record_date"
    EX_DATE = "ex_date"
    PAYABLE_DATE = "payable_date"


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"


class OptionStyle(str, Enum):
    AMERICAN = "american"
    EUROPEAN = "european"


class OptionStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ActivityKind(str, Enum):
    """Discriminant of the account activity sum type."""

    FILL = "FILL"
    OTHER = "OTHER"
