"""Account, account configuration and account activity models."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import Field

from alpaca_markets.core.errors import ParseError

from .base import AlpacaModel
from .enums import ActivityKind


class Account(AlpacaModel):
    """Brokerage account (GET /v2/account). Monetary values are decimal strings."""

    account_blocked: bool = False
    account_number: str = ""
    buying_power: str = ""
    cash: str = ""
    created_at: str = ""
    currency: str = ""
    daytrade_count: int = 0
    daytrading_buying_power: str = ""
    equity: str = ""
    id: str = ""
    initial_margin: str = ""
    last_equity: str = ""
    last_maintenance_margin: str = ""
    long_market_value: str = ""
    maintenance_margin: str = ""
    multiplier: str = ""
    pattern_day_trader: bool = False
    portfolio_value: str = ""
    regt_buying_power: str = ""
    short_market_value: str = ""
    shorting_enabled: bool = False
    sma: str = ""
    status: str = ""
    trade_suspended_by_user: bool = False
    trading_blocked: bool = False
    transfers_blocked: bool = False


class AccountConfigurations(AlpacaModel):
    """Account trading preferences (GET/PATCH /v2/account/configurations)."""

    dtbp_check: str = ""
    no_shorting: bool = False
    suspend_trade: bool = False
    trade_confirm_email: str = ""


class TradeActivity(AlpacaModel):
    """An order fill (activity_type == "FILL")."""

    kind: Literal[ActivityKind.FILL] = Field(default=ActivityKind.FILL, exclude=True)

    activity_type: str = ""
    cum_qty: str = ""
    id: str = ""
    leaves_qty: str = ""
    order_id: str = ""
    price: str = ""
    qty: str = ""
    side: str = ""
    symbol: str = ""
    transaction_time: str = ""
    type: str = ""


class NonTradeActivity(AlpacaModel):
    """Any other account activity: dividends, fees, transfers, ..."""

    kind: Literal[ActivityKind.OTHER] = Field(default=ActivityKind.OTHER, exclude=True)

    activity_type: str = ""
    date: str = ""
    id: str = ""
    net_amount: str = ""
    per_share_amount: str = ""
    qty: str = ""
    symbol: str = ""


Activity = Union[TradeActivity, NonTradeActivity]

FILL_ACTIVITY_TYPE = "FILL"


def parse_activity(raw: Any) -> Activity:
    """Decode one account activity, choosing the branch by activity_type.

    Raises:
        ParseError: If the discriminator is missing or the payload is invalid
    """
    if not isinstance(raw, dict) or not isinstance(raw.get("activity_type"), str):
        raise ParseError("Activity didn't have activity_type attribute", field="activity_type")

    # The discriminant is derived from activity_type, never read from the wire
    payload = {k: v for k, v in raw.items() if k != "kind"}
    if raw["activity_type"] == FILL_ACTIVITY_TYPE:
        return TradeActivity.from_json(payload)
    return NonTradeActivity.from_json(payload)


def parse_activities(payload: Any) -> list[Activity]:
    """Decode the activity list returned by /v2/account/activities."""
    if not isinstance(payload, list):
        raise ParseError("Expected a JSON array of activities", value=type(payload).__name__)
    return [parse_activity(item) for item in payload]
