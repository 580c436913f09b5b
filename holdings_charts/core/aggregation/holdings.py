"""Ranked per-position records for the holdings charts."""

from typing import Optional, Sequence

from holdings_charts.core.formatting import get_symbol
from holdings_charts.models import (
    Account,
    AccountHolding,
    HoldingRecord,
    Investment,
    Position,
)
from holdings_charts.utils.logging_config import get_logger

from .weights import weight_entries

logger = get_logger(__name__)


def rank_positions(positions: Sequence[Position]) -> list[Position]:
    """Positions ordered by market value, largest first (stable)."""
    return sorted(positions, key=lambda p: p.market_value, reverse=True)


def average_cost(investments: Sequence[Investment]) -> Optional[float]:
    """
    Mean of the per-lot unit costs (book_value / quantity).

    Not quantity-weighted: every lot counts once, whatever its size.
    Lots with zero quantity have no unit cost and are left out.

    Args:
        investments: Lots of one position

    Returns:
        Average unit cost, or None when no lot has a quantity
    """
    unit_costs = [lot.book_value / lot.quantity for lot in investments if lot.quantity]
    if not unit_costs:
        return None
    return sum(unit_costs) / len(unit_costs)


def account_breakdown(
    accounts: Sequence[Account], symbol: str
) -> list[AccountHolding]:
    """Accounts holding `symbol`, largest quantity first."""
    holdings = []
    for account in accounts:
        quantity = account.quantity_of(symbol)
        if quantity is None:
            continue
        holdings.append(
            AccountHolding(name=account.name, type=account.type, quantity=quantity)
        )
    holdings.sort(key=lambda h: h.quantity, reverse=True)
    return holdings


def gain_percent_display(gain_percent: Optional[float]) -> Optional[float]:
    """Fractional gain as percent; None stays None."""
    if gain_percent is None:
        return None
    return gain_percent * 100


def aggregate_holdings(
    positions: Sequence[Position], accounts: Optional[Sequence[Account]] = None
) -> list[HoldingRecord]:
    """
    Build one enriched record per position, ranked by market value.

    Args:
        positions: Portfolio positions
        accounts: Accounts used for the per-account breakdown

    Returns:
        HoldingRecords, largest market value first, whose percentages sum
        to 100 whenever the portfolio has value
    """
    accounts = accounts or []
    ranked = rank_positions(positions)
    weights = weight_entries([(get_symbol(p.security), p.market_value) for p in ranked])

    records = []
    for position, weight in zip(ranked, weights):
        currency = position.security.currency
        records.append(
            HoldingRecord(
                symbol=weight.name,
                market_value=weight.value,
                percentage=weight.percentage,
                gain_percent=gain_percent_display(position.gain_percent),
                profit=position.gain_amount,
                average_cost=average_cost(position.investments),
                shares=position.quantity,
                last_price=position.security.last_price,
                currency=currency.upper() if currency else currency,
                accounts=account_breakdown(accounts, weight.name),
            )
        )

    logger.debug(f"Aggregated {len(records)} holdings")
    return records
