"""
Aggregation module for the holdings charts.

Turns positions and accounts into holdings, currency composition,
gainers/losers and drill-down series, then assembles the chart options.
Everything here is a pure function of its inputs.

Public API:
    build_holdings_charts(positions, accounts, is_private_mode) -> HoldingsCharts
"""

from typing import Optional, Sequence

from holdings_charts.models import (
    Account,
    ClickHandler,
    HoldingsCharts,
    Position,
    TransactionColorMap,
)
from holdings_charts.utils.logging_config import get_logger

from .currency import group_by_currency, group_cash_by_currency, group_stocks_by_currency
from .drilldown import index_drilldown
from .holdings import aggregate_holdings
from .ranking import rank_gainers_losers
from .series import (
    build_chart_options,
    build_currency_series,
    build_drilldown,
    build_gain_loss_series,
    build_positions_series,
)
from .visualizer import build_backtest_url, encode_portfolio_weights
from .weights import normalize_weights, weight_entries

logger = get_logger(__name__)

__all__ = [
    "build_holdings_charts",
    "aggregate_holdings",
    "group_by_currency",
    "group_cash_by_currency",
    "group_stocks_by_currency",
    "index_drilldown",
    "rank_gainers_losers",
    "encode_portfolio_weights",
    "build_backtest_url",
    "normalize_weights",
    "weight_entries",
]


def build_holdings_charts(
    positions: Sequence[Position],
    accounts: Sequence[Account],
    is_private_mode: bool = False,
    on_select: Optional[ClickHandler] = None,
    colors: Optional[TransactionColorMap] = None,
) -> HoldingsCharts:
    """
    Build every chart of the holdings view.

    Args:
        positions: Portfolio positions
        accounts: Brokerage accounts (cash and per-account quantities)
        is_private_mode: Hide value labels; computed values are unaffected
        on_select: Called with the symbol clicked in a holdings chart
        colors: Transaction color table for the drill-down series

    Returns:
        HoldingsCharts with the five chart options and the backtest link
    """
    if not positions:
        logger.warning("No positions found; charts will be empty.")

    holdings = aggregate_holdings(positions, accounts)
    column, pie = build_positions_series(holdings, is_private_mode, on_select)
    drilldown = build_drilldown(index_drilldown(positions, colors), is_private_mode)

    charts = HoldingsCharts(
        holdings_column=build_chart_options(
            [column],
            subtitle="(click on a stock to view transactions)",
            y_axis_title="Market Value ($)",
            drilldown=drilldown,
            is_private_mode=is_private_mode,
        ),
        holdings_pie=build_chart_options(
            [pie],
            subtitle="(click on a stock to view timeline and transactions)",
            is_private_mode=is_private_mode,
        ),
        currency_composition=build_chart_options(
            [build_currency_series(group_by_currency(accounts, positions))],
            title="USD/CAD Composition",
            is_private_mode=is_private_mode,
        ),
        top_gainers=build_chart_options(
            [build_gain_loss_series(rank_gainers_losers(positions, True), True)],
            title="Top Gainers",
            y_axis_title="Gain (%)",
            is_private_mode=is_private_mode,
        ),
        top_losers=build_chart_options(
            [build_gain_loss_series(rank_gainers_losers(positions, False), False)],
            title="Top Losers",
            y_axis_title="Loss (%)",
            is_private_mode=is_private_mode,
        ),
        backtest_url=build_backtest_url(holdings),
    )

    logger.info(
        f"Built holdings charts for {len(positions)} positions "
        f"across {len(accounts)} accounts"
    )
    return charts
