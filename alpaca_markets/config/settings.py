"""Client configuration using Pydantic. No side effects at import time.

Nothing here is process-global: build an Environment (and optionally a
TimeoutConfig) and pass it to the Client explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import AliasChoices, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from alpaca_markets.core.errors import ConfigurationError
from alpaca_markets.observability.logger import get_logger

from .constants import (
    API_KEY_ID_ENV,
    API_SECRET_KEY_ENV,
    DATA_BASE_URL,
    DATA_BASE_URL_ENV,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_WRITE_TIMEOUT,
    LONG_CONNECT_TIMEOUT,
    LONG_READ_TIMEOUT,
    LONG_WRITE_TIMEOUT,
    TRADING_BASE_URL_ENV,
    TRADING_BASE_URL_PAPER,
    TRADING_STREAM_URL_ENV,
)

logger = get_logger(__name__)

# Field name -> env var reported when it is missing
_REQUIRED_ENV_VARS = {
    "api_key_id": API_KEY_ID_ENV,
    "api_secret_key": API_SECRET_KEY_ENV,
}


def mask_secret(value: str, visible_chars: int = 4) -> str:
    """Mask a secret value for safe logging."""
    if not value:
        return "(not set)"
    if len(value) <= visible_chars * 2:
        return "*" * len(value)
    return f"{value[:visible_chars]}...{value[-visible_chars:]}"


def ensure_https_scheme(url: str) -> str:
    """Prefix scheme-less URLs with https://."""
    if not url or "://" in url:
        return url
    return f"https://{url}"


def derive_stream_url(base_url: str) -> str:
    """Trading stream URL for a trading base URL (wss://<host>/stream)."""
    return f"wss://{httpx.URL(base_url).host}/stream"


class Environment(BaseSettings):
    """Credentials and endpoints for the Alpaca APIs.

    Settings are loaded from environment variables and .env file. Both the
    ALPACA_MARKETS_* names and the legacy APCA_* names are accepted; the
    ALPACA_MARKETS_* names win when both are set.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # === Credentials ===
    api_key_id: str = Field(
        validation_alias=AliasChoices("ALPACA_MARKETS_KEY_ID", API_KEY_ID_ENV),
    )
    api_secret_key: str = Field(
        validation_alias=AliasChoices("ALPACA_MARKETS_SECRET_KEY", API_SECRET_KEY_ENV),
    )

    # === Endpoints ===
    trading_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ALPACA_MARKETS_TRADING_URL", TRADING_BASE_URL_ENV),
    )
    data_base_url: str = Field(
        default=DATA_BASE_URL,
        validation_alias=AliasChoices("ALPACA_MARKETS_DATA_URL", DATA_BASE_URL_ENV),
    )
    trading_stream_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices(TRADING_STREAM_URL_ENV),
    )

    @field_validator("trading_base_url", "data_base_url")
    @classmethod
    def _add_scheme(cls, value: str | None) -> str | None:
        return ensure_https_scheme(value) if value else value

    @model_validator(mode="after")
    def _fill_defaults(self) -> Environment:
        if not self.trading_base_url:
            logger.warning(f"{TRADING_BASE_URL_ENV} not set, defaulting to paper trading URL")
            object.__setattr__(self, "trading_base_url", TRADING_BASE_URL_PAPER)
        if not self.trading_stream_url:
            object.__setattr__(
                self, "trading_stream_url", derive_stream_url(self.trading_base_url)
            )
        return self

    @classmethod
    def from_env_vars(
        cls,
        api_key_id_var: str,
        api_secret_key_var: str,
        trading_base_url_var: str = "",
        data_base_url_var: str = "",
        trading_stream_url_var: str = "",
    ) -> Environment:
        """Parse credentials and endpoints from non-standard variable names.

        Args:
            api_key_id_var: Variable holding the API key ID
            api_secret_key_var: Variable holding the API secret key
            trading_base_url_var: Variable holding the trading URL (optional)
            data_base_url_var: Variable holding the data URL (optional)
            trading_stream_url_var: Variable holding the stream URL (optional)

        Raises:
            ConfigurationError: If a credential variable is not set
        """
        values: dict[str, Any] = {}
        for field_name, var in (
            ("api_key_id", api_key_id_var),
            ("api_secret_key", api_secret_key_var),
        ):
            if var not in os.environ:
                raise ConfigurationError(f"{var} environment variable not set")
            values[field_name] = os.environ[var]

        for field_name, var in (
            ("trading_base_url", trading_base_url_var),
            ("data_base_url", data_base_url_var),
            ("trading_stream_url", trading_stream_url_var),
        ):
            if var and var in os.environ:
                values[field_name] = os.environ[var]

        return cls(**values)

    @property
    def trading_host(self) -> str:
        """Hostname of the trading API."""
        return httpx.URL(self.trading_base_url).host

    @property
    def data_host(self) -> str:
        """Hostname of the market data API."""
        return httpx.URL(self.data_base_url).host

    @property
    def is_paper(self) -> bool:
        """Whether the trading URL points at the paper trading API."""
        return self.trading_host.startswith("paper-")

    def log_config_summary(self) -> None:
        """Log configuration summary with masked secrets."""
        logger.info("=== Configuration Summary ===")
        logger.info(f"API key ID: {mask_secret(self.api_key_id)}")
        logger.info(f"API secret key: {mask_secret(self.api_secret_key)}")
        logger.info(f"Trading URL: {self.trading_base_url} (paper={self.is_paper})")
        logger.info(f"Data URL: {self.data_base_url}")
        logger.info(f"Stream URL: {self.trading_stream_url}")
        logger.info("=============================")


def load_environment(**overrides: Any) -> Environment:
    """Build an Environment, reporting missing credentials clearly.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        Parsed Environment

    Raises:
        ConfigurationError: If a required variable is not set
    """
    try:
        return Environment(**overrides)
    except ValidationError as e:
        for error in e.errors():
            if error["type"] != "missing":
                continue
            loc = str(error["loc"][0]) if error["loc"] else ""
            for field_name, var in _REQUIRED_ENV_VARS.items():
                if loc == field_name or loc.upper() in (var, f"ALPACA_MARKETS_{field_name[4:].upper()}"):
                    raise ConfigurationError(f"{var} environment variable not set") from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@dataclass(frozen=True)
class TimeoutConfig:
    """Request timeouts in seconds."""

    connection_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    write_timeout: float = DEFAULT_WRITE_TIMEOUT

    @classmethod
    def default(cls) -> TimeoutConfig:
        return cls()

    @classmethod
    def long_timeouts(cls) -> TimeoutConfig:
        """Longer timeouts for slow networks."""
        return cls(
            connection_timeout=LONG_CONNECT_TIMEOUT,
            read_timeout=LONG_READ_TIMEOUT,
            write_timeout=LONG_WRITE_TIMEOUT,
        )

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connection_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
            pool=self.connection_timeout,
        )
