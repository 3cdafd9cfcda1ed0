"""Corporate actions, news and option contract models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import AlpacaModel
from .enums import OptionStatus, OptionStyle, OptionType

# === Corporate actions ===


class Announcement(AlpacaModel):
    """Corporate action announcement (/v2/corporate_actions/announcements).

    Rates and cash amounts are decimal strings.
    """

    id: str = ""
    corporate_actions_id: str = ""
    ca_type: str = ""
    ca_sub_type: str = ""
    initiating_symbol: str = ""
    initiating_original_cusip: str = ""
    target_symbol: str = ""
    target_original_cusip: str = ""
    declaration_date: str = ""
    expiration_date: str = ""
    record_date: str = ""
    payable_date: str = ""
    cash: str = ""
    old_rate: str = ""
    new_rate: str = ""


class CorporateAction(AlpacaModel):
    """Corporate action from the market data API (/v1beta1/corporate-actions)."""

    id: str = ""
    corporate_action_type: str = Field(default="", alias="ca_type")
    symbol: str = ""
    new_symbol: str = ""
    description: str = ""
    process_date: str = ""
    ex_date: str = ""
    record_date: str = ""
    payable_date: str = ""
    old_rate: float = 0.0
    new_rate: float = 0.0
    rate: float = 0.0
    cash: float = 0.0
    created_at: str = ""
    updated_at: str = ""


class CorporateActions(AlpacaModel):
    corporate_actions: list[CorporateAction] = Field(default_factory=list)
    next_page_token: str = ""


# === News ===


class NewsImage(AlpacaModel):
    size: str = ""  # "large", "small" or "thumb"
    url: str = ""


class News(AlpacaModel):
    id: int = 0
    headline: str = ""
    author: str = ""
    created_at: str = ""
    updated_at: str = ""
    summary: str = ""
    content: str = ""
    url: str = ""
    images: list[NewsImage] = Field(default_factory=list)
    symbols: list[str] = Field(default_factory=list)
    source: str = ""


class NewsArticles(AlpacaModel):
    news: list[News] = Field(default_factory=list)
    next_page_token: str = ""


# === Options ===


class Deliverable(AlpacaModel):
    type: str = ""  # "cash" or "equity"
    symbol: str = ""
    asset_id: str = ""
    amount: str = ""
    allocation_percentage: str = ""
    settlement_type: str = ""
    settlement_method: str = ""
    delayed_settlement: bool = False


def _enum_or_default(enum_cls: type, default: Any, value: Any) -> Any:
    if isinstance(value, str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            return default
    return value


class OptionContract(AlpacaModel):
    id: str = ""
    symbol: str = ""
    name: str = ""
    status: OptionStatus = OptionStatus.ACTIVE
    tradable: bool = False
    underlying_symbol: str = ""
    underlying_asset_id: str = ""
    type: OptionType = OptionType.CALL
    style: OptionStyle = OptionStyle.AMERICAN
    strike_price: str = ""
    size: str = ""  # contract multiplier, typically "100"
    expiration_date: str = ""
    open_interest: str = ""
    open_interest_date: str = ""
    close_price: str = ""
    close_price_date: str = ""
    deliverables: list[Deliverable] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> Any:
        return _enum_or_default(OptionStatus, OptionStatus.ACTIVE, value)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        return _enum_or_default(OptionType, OptionType.CALL, value)

    @field_validator("style", mode="before")
    @classmethod
    def _parse_style(cls, value: Any) -> Any:
        return _enum_or_default(OptionStyle, OptionStyle.AMERICAN, value)


class OptionContracts(AlpacaModel):
    option_contracts: list[OptionContract] = Field(default_factory=list)
    next_page_token: str = ""
