"""Trading API models: orders, positions, assets, clock, calendar,
watchlists and portfolio history."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import AlpacaModel


class Order(AlpacaModel):
    """An order as returned by /v2/orders. Quantities and prices are decimal strings."""

    asset_class: str = ""
    asset_id: str = ""
    canceled_at: str = ""
    client_order_id: str = ""
    created_at: str = ""
    expired_at: str = ""
    extended_hours: bool = False
    failed_at: str = ""
    filled_at: str = ""
    filled_avg_price: str = ""
    filled_qty: str = ""
    id: str = ""
    legs: list[Order] = Field(default_factory=list)
    limit_price: str = ""
    qty: str = ""
    notional: str = ""
    order_class: str = ""
    side: str = ""
    status: str = ""
    stop_price: str = ""
    trail_price: str = ""
    trail_percent: str = ""
    hwm: str = ""
    submitted_at: str = ""
    symbol: str = ""
    time_in_force: str = ""
    type: str = ""
    updated_at: str = ""

    @property
    def has_legs(self) -> bool:
        """Whether the order was returned with nested legs (nested=true)."""
        return bool(self.legs)


class CancelledOrder(AlpacaModel):
    """Per-order result of DELETE /v2/orders."""

    id: str = ""
    status: int = 0
    body: Order = Field(default_factory=Order)


class Position(AlpacaModel):
    """An open position (GET /v2/positions)."""

    asset_class: str = ""
    asset_id: str = ""
    avg_entry_price: str = ""
    change_today: str = ""
    cost_basis: str = ""
    current_price: str = ""
    exchange: str = ""
    lastday_price: str = ""
    market_value: str = ""
    qty: str = ""
    side: str = ""
    symbol: str = ""
    unrealized_intraday_pl: str = ""
    unrealized_intraday_plpc: str = ""
    unrealized_pl: str = ""
    unrealized_plpc: str = ""


class ClosedPosition(AlpacaModel):
    """Per-symbol result of DELETE /v2/positions; body is the closing order."""

    symbol: str = ""
    status: int = 0
    body: Order = Field(default_factory=Order)


class Asset(AlpacaModel):
    asset_class: str = Field(default="", alias="class")
    easy_to_borrow: bool = False
    exchange: str = ""
    id: str = ""
    marginable: bool = False
    shortable: bool = False
    status: str = ""
    symbol: str = ""
    tradable: bool = False
    fractionable: bool = False
    name: str = ""
    maintenance_margin_requirement: int = 0


class Clock(AlpacaModel):
    is_open: bool = False
    next_close: str = ""
    next_open: str = ""
    timestamp: str = ""


class Date(AlpacaModel):
    """One trading day of the market calendar."""

    close: str = ""
    date: str = ""
    open: str = ""


class Watchlist(AlpacaModel):
    account_id: str = ""
    assets: list[Asset] = Field(default_factory=list)
    created_at: str = ""
    id: str = ""
    name: str = ""
    updated_at: str = ""


class PortfolioHistory(AlpacaModel):
    """Equity and profit/loss time series for the account."""

    base_value: float = 0.0
    equity: list[float] = Field(default_factory=list)
    profit_loss: list[float] = Field(default_factory=list)
    profit_loss_pct: list[float] = Field(default_factory=list)
    timeframe: str = ""
    timestamp: list[int] = Field(default_factory=list)

    @field_validator("equity", "profit_loss", "profit_loss_pct", "timestamp", mode="before")
    @classmethod
    def _skip_gaps(cls, value: object) -> object:
        # Periods without data are reported as null entries
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value
