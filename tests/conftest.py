"""
Pytest fixtures for the holdings charts tests.

Provides a small two-currency portfolio (models and raw payload) and a
guard that restores the root logger after logging tests.
"""

import logging

import pytest
from rich.logging import RichHandler

from holdings_charts.utils.logging_config import ChartsFormatter
from tests.factories import (
    make_account,
    make_portfolio_payload,
    make_position,
    make_transaction,
)


@pytest.fixture
def positions():
    """Three positions: CAD gainer, USD loser, CAD without a known gain."""
    return [
        make_position(
            symbol="VFV.TO",
            market_value=5000.0,
            currency="cad",
            gain_amount=1000.0,
            gain_percent=0.25,
            transactions=[
                make_transaction(type="buy", shares=10.0, price=5.0, amount=-50.0),
                make_transaction(
                    type="dividend",
                    date="2021-06-30",
                    amount=2.0,
                    price=None,
                    shares=None,
                ),
            ],
        ),
        make_position(
            symbol="AAPL",
            market_value=1500.0,
            currency="usd",
            gain_amount=-300.0,
            gain_percent=-0.1667,
        ),
        make_position(
            symbol="XEQT.TO",
            market_value=500.0,
            currency="CAD",
            gain_amount=0.0,
            gain_percent=None,
        ),
    ]


@pytest.fixture
def accounts():
    return [
        make_account(
            name="12345",
            type="TFSA",
            currency="cad",
            cash=250.0,
            holdings={"VFV.TO": 30.0, "XEQT.TO": 5.0},
        ),
        make_account(
            name="67890",
            type="RRSP",
            currency="usd",
            cash=100.0,
            holdings={"VFV.TO": 20.0, "AAPL": 10.0},
        ),
        make_account(
            name="55555", type="Margin", currency="USD", cash=50.0, holdings={}
        ),
    ]


@pytest.fixture
def portfolio_payload():
    return make_portfolio_payload()


@pytest.fixture
def restore_root_logger():
    """Drop the handlers configure_root_logger() installed and restore the level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler) or isinstance(
            handler.formatter, ChartsFormatter
        ):
            root.removeHandler(handler)
    root.setLevel(level)
