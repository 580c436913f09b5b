"""Tests for raw payload conversion."""

from unittest.mock import patch

import pytest

from holdings_charts.core.converters import (
    load_portfolio,
    records_to_accounts,
    records_to_positions,
    select_timeline_position,
)
from holdings_charts.core.errors import (
    ErrorPhase,
    HoldingsChartsError,
    PortfolioLoadError,
)
from tests.factories import make_position


class TestRecordsToPositions:
    def test_builds_models(self, portfolio_payload):
        positions = records_to_positions(portfolio_payload["positions"])

        assert [p.symbol for p in positions] == ["VFV.TO", "AAPL"]
        assert positions[0].transactions[0].date.isoformat() == "2021-03-04"

    def test_passes_models_through(self):
        position = make_position()

        assert records_to_positions([position]) == [position]

    def test_none_is_empty(self):
        assert records_to_positions(None) == []

    def test_invalid_record_names_index(self, portfolio_payload):
        records = portfolio_payload["positions"] + [{"security": {}}]

        with pytest.raises(PortfolioLoadError) as exc_info:
            records_to_positions(records)

        error = exc_info.value
        assert isinstance(error, HoldingsChartsError)
        assert error.phase is ErrorPhase.LOADING
        assert error.issue.item == "positions[2]"
        assert error.issue.field == "security.symbol"
        assert "positions[2]" in str(error)


class TestRecordsToAccounts:
    def test_builds_models(self, portfolio_payload):
        accounts = records_to_accounts(portfolio_payload["accounts"])

        assert accounts[1].quantity_of("AAPL") == 10.0

    def test_invalid_cash(self):
        with pytest.raises(PortfolioLoadError) as exc_info:
            records_to_accounts([{"name": "x", "cash": "lots"}])

        assert exc_info.value.issue.to_dict()["phase"] == "LOADING"


class TestLoadPortfolio:
    def test_reads_payload(self, portfolio_payload):
        snapshot = load_portfolio(portfolio_payload)

        assert len(snapshot.positions) == 2
        assert len(snapshot.accounts) == 2
        assert snapshot.is_private_mode is False

    def test_explicit_private_mode(self):
        assert load_portfolio({"isPrivateMode": True}).is_private_mode is True

    @patch("holdings_charts.core.converters.config")
    def test_private_mode_defaults_to_config(self, mock_config):
        mock_config.PRIVATE_MODE = True

        snapshot = load_portfolio({"positions": [], "accounts": []})

        assert snapshot.is_private_mode is True
        assert snapshot.positions == []


class TestSelectTimelinePosition:
    def test_finds_symbol(self, positions):
        assert select_timeline_position(positions, "AAPL").symbol == "AAPL"

    def test_unknown_or_empty_symbol(self, positions):
        assert select_timeline_position(positions, "MSFT") is None
        assert select_timeline_position(positions, None) is None
