"""
Pydantic models for portfolio inputs, derived aggregates and chart payloads.

Usage:
    from holdings_charts.models import Position, Account, HoldingRecord
"""

from .portfolio import Account, AccountPosition, Investment, Position, Security, Transaction
from .transaction_type import (
    AccountType,
    TransactionColorMap,
    TransactionType,
    is_trade,
    normalize_transaction_type,
)
from .aggregates import (
    AccountHolding,
    CashAccountEntry,
    CurrencyBucket,
    CurrencyComposition,
    DrilldownPoint,
    DrilldownSeries,
    GainLossEntry,
    HoldingRecord,
    WeightedEntry,
    display_currency,
)
from .charts import ChartOptions, ChartSeries, ClickHandler, HoldingsCharts

__all__ = [
    # Inputs
    "Security",
    "Investment",
    "Transaction",
    "Position",
    "AccountPosition",
    "Account",
    # Enumerations
    "TransactionType",
    "AccountType",
    "TransactionColorMap",
    "is_trade",
    "normalize_transaction_type",
    # Aggregates
    "CurrencyBucket",
    "CashAccountEntry",
    "CurrencyComposition",
    "WeightedEntry",
    "AccountHolding",
    "HoldingRecord",
    "GainLossEntry",
    "DrilldownPoint",
    "DrilldownSeries",
    "display_currency",
    # Chart payloads
    "ChartSeries",
    "ChartOptions",
    "HoldingsCharts",
    "ClickHandler",
]
