"""Pure constants for the Alpaca client. No side effects at import time."""

# === Base URLs ===
TRADING_BASE_URL_LIVE = "https://api.alpaca.markets"
TRADING_BASE_URL_PAPER = "https://paper-api.alpaca.markets"
DATA_BASE_URL = "https://data.alpaca.markets"
TRADING_STREAM_URL_LIVE = "wss://api.alpaca.markets/stream"
TRADING_STREAM_URL_PAPER = "wss://paper-api.alpaca.markets/stream"

# === Auth headers ===
API_KEY_ID_HEADER = "APCA-API-KEY-ID"
API_SECRET_KEY_HEADER = "APCA-API-SECRET-KEY"

# === Environment variables (legacy names; ALPACA_MARKETS_* take precedence) ===
API_KEY_ID_ENV = "APCA_API_KEY_ID"
API_SECRET_KEY_ENV = "APCA_API_SECRET_KEY"
TRADING_BASE_URL_ENV = "APCA_API_BASE_URL"
DATA_BASE_URL_ENV = "APCA_API_DATA_URL"
TRADING_STREAM_URL_ENV = "ALPACA_MARKETS_STREAM_URL"

# === Retry ===
DEFAULT_MAX_RETRIES = 3
DEFAULT_INITIAL_DELAY_MS = 100
DEFAULT_MAX_DELAY_MS = 5000
DEFAULT_BACKOFF_MULTIPLIER = 2.0

# === Timeouts (seconds) ===
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0
DEFAULT_WRITE_TIMEOUT = 30.0
LONG_CONNECT_TIMEOUT = 30.0
LONG_READ_TIMEOUT = 60.0
LONG_WRITE_TIMEOUT = 60.0

# === Page sizes ===
DEFAULT_MARKET_DATA_LIMIT = 1000  # trades, quotes, bars, auctions (max 10000)
DEFAULT_NEWS_LIMIT = 50  # news API max is 50
DEFAULT_OPTION_CONTRACTS_LIMIT = 100
DEFAULT_ORDERS_LIMIT = 50
