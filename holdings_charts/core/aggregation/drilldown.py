"""Per-symbol transaction series for the drill-down view."""

from typing import Optional, Sequence

from holdings_charts import config
from holdings_charts.core.formatting import (
    NOT_AVAILABLE,
    format_date_label,
    format_money,
    format_number,
    get_symbol,
    start_case,
)
from holdings_charts.models import (
    DrilldownPoint,
    DrilldownSeries,
    Position,
    Transaction,
    TransactionColorMap,
    is_trade,
)
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)


def transaction_label(transaction: Transaction) -> str:
    """
    Short label for a transaction.

    Trades show "shares@price" (e.g. "10@5"); anything else shows the
    title-cased type and the amount (e.g. "Dividend@$2.00").
    """
    if is_trade(transaction.type):
        return f"{format_number(transaction.shares)}@{format_number(transaction.price)}"
    return f"{start_case(transaction.type)}@{format_money(transaction.amount)}"


def build_drilldown_point(
    transaction: Transaction,
    colors: TransactionColorMap,
    currency: Optional[str] = None,
) -> DrilldownPoint:
    """Chart point for one transaction; a missing currency falls back to `currency`."""
    if transaction.currency is None and currency is not None:
        transaction = transaction.model_copy(update={"currency": currency})
    trade = is_trade(transaction.type)
    return DrilldownPoint(
        name=format_date_label(transaction.date),
        y=transaction.amount,
        color=colors.color_for(transaction.type),
        display_value=format_money(transaction.amount),
        type=start_case(transaction.type),
        price=transaction.price if trade else NOT_AVAILABLE,
        shares=transaction.shares if trade else NOT_AVAILABLE,
        label=transaction_label(transaction),
        transaction=transaction,
    )


def index_drilldown(
    positions: Sequence[Position], colors: Optional[TransactionColorMap] = None
) -> dict[str, DrilldownSeries]:
    """
    Index every position's transactions by symbol.

    Transactions keep their stored order; nothing is re-sorted.

    Args:
        positions: Portfolio positions
        colors: Transaction color table, defaults to DEFAULT_TRANSACTION_COLORS

    Returns:
        Ordered mapping of symbol -> DrilldownSeries
    """
    colors = colors or config.DEFAULT_TRANSACTION_COLORS

    index: dict[str, DrilldownSeries] = {}
    for position in positions:
        symbol = get_symbol(position.security)
        if symbol in index:
            logger.warning(f"Duplicate position for {symbol}; keeping the last one")
        index[symbol] = DrilldownSeries(
            id=symbol,
            name=symbol,
            currency=position.currency,
            points=[
                build_drilldown_point(t, colors, position.currency)
                for t in position.transactions
            ],
        )

    logger.debug(f"Indexed transactions for {len(index)} symbols")
    return index
