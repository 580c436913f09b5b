"""Tests for portfolio, aggregate and chart models."""

import datetime as dt
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from holdings_charts.models import (
    Account,
    ChartSeries,
    CurrencyBucket,
    Position,
    Transaction,
    TransactionColorMap,
    TransactionType,
    display_currency,
    is_trade,
    normalize_transaction_type,
)
from holdings_charts.core.formatting import round_half_up
from tests.factories import make_account, make_position


class TestTransaction:
    def test_parses_iso_timestamp(self):
        transaction = Transaction(type="buy", date="2021-03-04T15:30:00.000Z")

        assert transaction.date == dt.date(2021, 3, 4)

    def test_parses_plain_date(self):
        assert Transaction(type="buy", date="2021-03-04").date == dt.date(2021, 3, 4)

    def test_accepts_datetime(self):
        transaction = Transaction(type="buy", date=dt.datetime(2020, 1, 2, 3, 4))

        assert transaction.date == dt.date(2020, 1, 2)

    def test_rejects_garbage_date(self):
        with pytest.raises(ValidationError):
            Transaction(type="buy", date="not-a-date")


class TestPosition:
    def test_is_frozen(self):
        position = make_position()

        with pytest.raises(ValidationError):
            position.market_value = 1.0

    def test_symbol_and_currency_shortcuts(self):
        position = make_position(symbol="AAPL", currency="usd")

        assert position.symbol == "AAPL"
        assert position.currency == "usd"

    def test_requires_symbol(self):
        with pytest.raises(ValidationError):
            Position.model_validate({"security": {"symbol": ""}})

    def test_ignores_unknown_fields(self):
        position = Position.model_validate(
            {"security": {"symbol": "X"}, "marketCap": 123}
        )

        assert position.gain_percent is None


class TestAccount:
    def test_quantity_of(self):
        account = make_account(holdings={"A": 3.0, "B": 4.0})

        assert account.quantity_of("B") == 4.0
        assert account.quantity_of("C") is None

    def test_defaults(self):
        account = Account(name="x")

        assert account.cash == 0.0
        assert account.positions == []


class TestTransactionTypes:
    def test_normalize(self):
        assert normalize_transaction_type("Buy") is TransactionType.BUY
        assert normalize_transaction_type("journal") is None
        assert normalize_transaction_type(None) is None

    @pytest.mark.parametrize(
        "value, expected",
        [("buy", True), ("SELL", True), ("dividend", False), ("", False), (None, False)],
    )
    def test_is_trade(self, value, expected):
        assert is_trade(value) is expected

    def test_color_map_lookup(self):
        colors = TransactionColorMap(version="v", colors={"buy": "green"}, default="grey")

        assert colors.color_for("BUY") == "green"
        assert colors.color_for("fee") == "grey"
        assert colors.color_for(None) == "grey"


class TestCurrencyBucket:
    def test_accumulate_returns_new_bucket(self):
        bucket = CurrencyBucket(currency="usd", kind="Stocks")

        updated = bucket.accumulate(200.0, 25.0)

        assert bucket.value == 0.0
        assert updated.value == 200.0
        assert updated.gain_percent == 12.5

    def test_dump_includes_label(self):
        dumped = CurrencyBucket(currency="cad", kind="Cash", value=5.0).model_dump()

        assert dumped["label"] == "CAD Cash"
        assert dumped["gain_percent"] == 0.0

    def test_gain_percent_rounds_half_up(self):
        bucket = CurrencyBucket(currency="usd", kind="Stocks", value=300.0, gain=100.0)

        with patch(
            "holdings_charts.core.formatting.round_half_up", wraps=round_half_up
        ) as mock_round:
            assert bucket.gain_percent == 33.33

        mock_round.assert_called_once()
        assert mock_round.call_args.args[1] == 2

    def test_display_currency(self):
        assert display_currency("usd") == "USD"
        assert display_currency(None) == "NONE"


class TestChartSeries:
    def test_to_dict_uses_chart_keys(self):
        series = ChartSeries(
            type="column",
            name="Holdings",
            data=[{"name": "A", "y": 1.0}],
            color_by_point=True,
            data_labels={"enabled": True},
            show_in_legend=False,
        )

        result = series.to_dict()

        assert result["colorByPoint"] is True
        assert result["dataLabels"] == {"enabled": True}
        assert result["showInLegend"] is False
        assert "events" not in result

    def test_click_forwards_point_name(self):
        clicked = []
        series = ChartSeries(type="pie", name="Holdings", on_click=clicked.append)

        series.click("AAPL")
        series.to_dict()["events"]["click"]("MSFT")

        assert clicked == ["AAPL", "MSFT"]

    def test_click_without_handler_is_noop(self):
        ChartSeries(type="pie", name="Holdings").click("AAPL")
