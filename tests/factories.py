"""Test Fixture Factories - Factory functions create valid portfolio objects with sensible defaults."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from holdings_charts.models import (
    Account,
    AccountPosition,
    AccountType,
    Investment,
    Position,
    Security,
    Transaction,
)


def make_security(**overrides: Any) -> Security:
    """Create a valid Security with sensible defaults."""
    defaults: Dict[str, Any] = {
        "symbol": "SHOP.TO",
        "currency": "cad",
        "last_price": 50.0,
        "name": "Shopify Inc",
    }
    defaults.update(overrides)
    return Security(**defaults)


def make_transaction(**overrides: Any) -> Transaction:
    """Create a valid buy Transaction with sensible defaults."""
    defaults: Dict[str, Any] = {
        "type": "buy",
        "date": "2021-03-04",
        "amount": -50.0,
        "price": 5.0,
        "shares": 10.0,
        "currency": "cad",
    }
    defaults.update(overrides)
    return Transaction(**defaults)


def make_position(
    symbol: str = "SHOP.TO",
    market_value: float = 1000.0,
    currency: Optional[str] = "cad",
    **overrides: Any,
) -> Position:
    """Create a valid Position; `symbol` and `currency` go to its Security."""
    defaults: Dict[str, Any] = {
        "security": make_security(symbol=symbol, currency=currency),
        "investments": [Investment(book_value=800.0, quantity=20.0)],
        "transactions": [],
        "market_value": market_value,
        "quantity": 20.0,
        "gain_amount": 200.0,
        "gain_percent": 0.25,
    }
    defaults.update(overrides)
    return Position(**defaults)


def make_account(
    name: str = "12345",
    holdings: Optional[Dict[str, float]] = None,
    **overrides: Any,
) -> Account:
    """Create a valid Account; `holdings` maps symbol -> quantity."""
    defaults: Dict[str, Any] = {
        "name": name,
        "type": AccountType.TFSA.value,
        "currency": "cad",
        "cash": 0.0,
        "positions": [
            AccountPosition(symbol=symbol, quantity=quantity)
            for symbol, quantity in (holdings or {}).items()
        ],
    }
    defaults.update(overrides)
    return Account(**defaults)


def make_positions(values: List[float], **overrides: Any) -> List[Position]:
    """Create one position per market value, symbols S1, S2, ..."""
    return [
        make_position(symbol=f"S{i + 1}", market_value=value, **overrides)
        for i, value in enumerate(values)
    ]


def make_portfolio_payload(
    positions: Optional[List[Dict[str, Any]]] = None,
    accounts: Optional[List[Dict[str, Any]]] = None,
    is_private_mode: bool = False,
) -> Dict[str, Any]:
    """Create a raw command payload as sent over the wire."""
    if positions is None:
        positions = [
            {
                "security": {"symbol": "VFV.TO", "currency": "cad", "last_price": 100.0},
                "investments": [{"book_value": 4000.0, "quantity": 50.0}],
                "transactions": [
                    {
                        "type": "buy",
                        "date": "2021-03-04T15:00:00Z",
                        "amount": -4000.0,
                        "price": 80.0,
                        "shares": 50.0,
                    },
                    {"type": "dividend", "date": "2021-06-30", "amount": 25.5},
                ],
                "market_value": 5000.0,
                "quantity": 50.0,
                "gain_amount": 1000.0,
                "gain_percent": 0.25,
            },
            {
                "security": {"symbol": "AAPL", "currency": "usd", "last_price": 150.0},
                "investments": [{"book_value": 1800.0, "quantity": 10.0}],
                "transactions": [],
                "market_value": 1500.0,
                "quantity": 10.0,
                "gain_amount": -300.0,
                "gain_percent": -0.1667,
            },
        ]
    if accounts is None:
        accounts = [
            {
                "name": "12345",
                "type": "TFSA",
                "currency": "cad",
                "cash": 250.0,
                "positions": [{"symbol": "VFV.TO", "quantity": 30.0}],
            },
            {
                "name": "67890",
                "type": "RRSP",
                "currency": "usd",
                "cash": 100.0,
                "positions": [
                    {"symbol": "VFV.TO", "quantity": 20.0},
                    {"symbol": "AAPL", "quantity": 10.0},
                ],
            },
        ]
    return {
        "positions": positions,
        "accounts": accounts,
        "isPrivateMode": is_private_mode,
    }
