"""Tests for alpaca_markets/models."""

import pytest
from pydantic import ValidationError

from alpaca_markets.core.errors import ParseError
from alpaca_markets.models import (
    Account,
    ActivityKind,
    Asset,
    Auctions,
    Bar,
    CryptoBar,
    NonTradeActivity,
    OptionContract,
    OptionStatus,
    OptionStyle,
    OptionType,
    Order,
    PortfolioHistory,
    Quote,
    Snapshot,
    Trade,
    TradeActivity,
    parse_activities,
    parse_activity,
    parse_list,
    parse_mapping,
)

from .fixtures.responses import (
    ACTIVITIES_RESPONSE,
    ASSET_RESPONSE,
    AUCTIONS_RESPONSE,
    BAR_PAYLOAD,
    BRACKET_ORDER_RESPONSE,
    ORDER_RESPONSE,
    PORTFOLIO_HISTORY_RESPONSE,
    QUOTE_PAYLOAD,
    SNAPSHOT_RESPONSE,
    TRADE_PAYLOAD,
)


# =============================================================================
# Base Model Behaviour
# =============================================================================


class TestAlpacaModel:
    """Shared behaviour of every payload model."""

    def test_nulls_use_defaults(self):
        """null values fall back to the field default."""
        order = Order.from_json(ORDER_RESPONSE)
        assert order.filled_at == ""
        assert order.stop_price == ""
        assert order.legs == []

    def test_unknown_fields_ignored(self):
        account = Account.from_json({"id": "abc", "crypto_status": "ACTIVE", "new_field": 1})
        assert account.id == "abc"

    def test_wrong_type_is_parse_error(self):
        """Validation failures surface as ParseError with the failing field."""
        with pytest.raises(ParseError) as exc_info:
            Account.from_json({"daytrade_count": "many"})

        assert exc_info.value.field == "daytrade_count"
        assert exc_info.value.value == "many"

    def test_non_object_is_parse_error(self):
        with pytest.raises(ParseError):
            Trade.from_json(["not", "an", "object"])

    def test_frozen(self):
        trade = Trade.from_json(TRADE_PAYLOAD)
        with pytest.raises(ValidationError):
            trade.price = 1.0

    def test_readable_names_accepted(self):
        """Models accept field names as well as wire keys."""
        assert Trade(price=10.0, size=5).price == 10.0


class TestParseHelpers:
    def test_parse_list(self):
        orders = parse_list(Order, [ORDER_RESPONSE, ORDER_RESPONSE])
        assert len(orders) == 2

    def test_parse_list_rejects_object(self):
        with pytest.raises(ParseError):
            parse_list(Order, ORDER_RESPONSE)

    def test_parse_mapping_none(self):
        """A missing symbol map is an empty dict."""
        assert parse_mapping(Trade, None) == {}

    def test_parse_mapping_rejects_list(self):
        with pytest.raises(ParseError):
            parse_mapping(Trade, [TRADE_PAYLOAD])


# =============================================================================
# Account Activities (Sum Type)
# =============================================================================


class TestActivities:
    """FILL activities decode as TradeActivity, everything else as NonTradeActivity."""

    def test_fill(self):
        activity = parse_activity(ACTIVITIES_RESPONSE[0])
        assert isinstance(activity, TradeActivity)
        assert activity.kind is ActivityKind.FILL
        assert activity.leaves_qty == "0"

    def test_other(self):
        activity = parse_activity(ACTIVITIES_RESPONSE[1])
        assert isinstance(activity, NonTradeActivity)
        assert activity.kind is ActivityKind.OTHER
        assert activity.per_share_amount == "0.51"

    @pytest.mark.parametrize("activity_type", ["DIV", "FEE", "JNLC", "TRANS", "fill"])
    def test_non_fill_types(self, activity_type):
        """Only the exact string FILL selects the trade branch."""
        activity = parse_activity({"activity_type": activity_type, "id": "x"})
        assert activity.kind is ActivityKind.OTHER

    def test_missing_discriminator(self):
        with pytest.raises(ParseError) as exc_info:
            parse_activity({"id": "x", "symbol": "AAPL"})
        assert str(exc_info.value) == "Activity didn't have activity_type attribute"

    def test_wire_kind_ignored(self):
        """A "kind" key on the wire cannot override the discriminant."""
        activity = parse_activity({"activity_type": "DIV", "kind": "FILL"})
        assert activity.kind is ActivityKind.OTHER

    def test_kind_not_serialized(self):
        activity = parse_activity(ACTIVITIES_RESPONSE[0])
        assert "kind" not in activity.model_dump()

    def test_parse_activities(self):
        kinds = [a.kind for a in parse_activities(ACTIVITIES_RESPONSE)]
        assert kinds == [ActivityKind.FILL, ActivityKind.OTHER]

    def test_parse_activities_rejects_object(self):
        with pytest.raises(ParseError):
            parse_activities({"activities": []})


# =============================================================================
# Trading Models
# =============================================================================


class TestTradingModels:
    def test_nested_legs(self):
        order = Order.from_json(BRACKET_ORDER_RESPONSE)
        assert order.has_legs is True
        assert order.legs[1].stop_price == "95.00"
        assert Order.from_json(ORDER_RESPONSE).has_legs is False

    def test_asset_class_keyword(self):
        """The wire key "class" maps to asset_class."""
        asset = Asset.from_json(ASSET_RESPONSE)
        assert asset.asset_class == "us_equity"
        assert asset.maintenance_margin_requirement == 30

    def test_portfolio_history_skips_null_points(self):
        history = PortfolioHistory.from_json(PORTFOLIO_HISTORY_RESPONSE)
        assert history.profit_loss == [11.8, -3.74]
        assert history.base_value == 27411.93
        assert history.timeframe == "15Min"


# =============================================================================
# Market Data Models
# =============================================================================


class TestMarketDataModels:
    def test_trade_short_keys(self):
        trade = Trade.from_json(TRADE_PAYLOAD)
        assert trade.price == 187.15
        assert trade.size == 100
        assert trade.exchange == "V"
        assert trade.tape == "C"

    def test_quote_short_keys(self):
        quote = Quote.from_json(QUOTE_PAYLOAD)
        assert quote.ask_price == 187.2
        assert quote.bid_exchange == "V"
        assert quote.conditions == ["R"]

    def test_bar(self):
        bar = Bar.from_json(BAR_PAYLOAD)
        assert bar.high_price == 188.44
        assert bar.volume == 82488674
        assert bar.vwap == 185.77

    def test_snapshot(self):
        snapshot = Snapshot.from_json(SNAPSHOT_RESPONSE)
        assert snapshot.latest_trade.id == 52983525029461
        assert snapshot.prev_daily_bar.open_price == 187.15

    def test_partial_snapshot(self):
        """Sections missing from a snapshot are empty models."""
        snapshot = Snapshot.from_json({"latestTrade": TRADE_PAYLOAD, "minuteBar": None})
        assert snapshot.minute_bar == Bar()

    def test_auctions(self):
        auctions = Auctions.from_json(AUCTIONS_RESPONSE)
        daily = auctions.auctions["AAPL"].daily_auctions
        assert [a.price for a in daily] == [187.15, 185.64]
        assert auctions.next_page_token == ""

    def test_crypto_bar_fractional_volume(self):
        bar = CryptoBar.from_json({"v": 0.5, "n": 3})
        assert bar.volume == 0.5


class TestOptionContract:
    def test_enums_parsed(self):
        contract = OptionContract.from_json({"type": "put", "style": "european", "status": "inactive"})
        assert contract.type is OptionType.PUT
        assert contract.style is OptionStyle.EUROPEAN
        assert contract.status is OptionStatus.INACTIVE

    def test_unknown_enum_values_default(self):
        """Unrecognised enum strings fall back to the defaults."""
        contract = OptionContract.from_json({"type": "binary", "style": "bermudan", "status": "halted"})
        assert contract.type is OptionType.CALL
        assert contract.style is OptionStyle.AMERICAN
        assert contract.status is OptionStatus.ACTIVE
