"""Chart Data Handlers.

Each handler reads a portfolio payload of the form

    {"positions": [...], "accounts": [...], "isPrivateMode": false}

and answers with one part of the holdings charts.
"""

from typing import Any, Callable

from holdings_charts.core.aggregation import (
    aggregate_holdings,
    build_backtest_url,
    build_holdings_charts,
    encode_portfolio_weights,
    group_by_currency,
    index_drilldown,
    rank_gainers_losers,
)
from holdings_charts.core.aggregation.series import (
    build_currency_series,
    build_drilldown_series,
    build_gain_loss_series,
)
from holdings_charts.core.converters import PortfolioSnapshot, load_portfolio
from holdings_charts.core.errors import PortfolioLoadError
from holdings_charts.headless.responses import error_response, success_response
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)


def _with_portfolio(
    cmd_id: int,
    payload: dict[str, Any],
    build: Callable[[PortfolioSnapshot], Any],
) -> dict[str, Any]:
    try:
        snapshot = load_portfolio(payload)
    except PortfolioLoadError as e:
        details = e.issue.to_dict() if e.issue else None
        return error_response(cmd_id, "INVALID_PORTFOLIO", str(e), details)
    return success_response(cmd_id, build(snapshot))


def handle_get_holdings_charts(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Get every chart of the holdings view plus the backtest link.

    Args:
        cmd_id: Command identifier.
        payload: Portfolio payload.

    Returns:
        Success response with the chart options, or INVALID_PORTFOLIO.
    """

    def build(snapshot: PortfolioSnapshot) -> dict[str, Any]:
        charts = build_holdings_charts(
            snapshot.positions, snapshot.accounts, snapshot.is_private_mode
        )
        return charts.to_dict()

    return _with_portfolio(cmd_id, payload, build)


def handle_get_backtest_link(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Get the Portfolio Visualizer link and the encoded weights."""

    def build(snapshot: PortfolioSnapshot) -> dict[str, Any]:
        holdings = aggregate_holdings(snapshot.positions, snapshot.accounts)
        return {
            "url": build_backtest_url(holdings),
            "params": encode_portfolio_weights(holdings),
        }

    return _with_portfolio(cmd_id, payload, build)


def handle_get_currency_composition(
    cmd_id: int, payload: dict[str, Any]
) -> dict[str, Any]:
    """Get cash and stock value per currency."""

    def build(snapshot: PortfolioSnapshot) -> dict[str, Any]:
        composition = group_by_currency(snapshot.accounts, snapshot.positions)
        return {
            "totalValue": composition.total_value,
            "buckets": [b.model_dump() for b in composition.ordered_buckets()],
            "series": build_currency_series(composition).to_dict(),
        }

    return _with_portfolio(cmd_id, payload, build)


def handle_get_gainers_losers(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Get the ranked gainers and losers series."""

    def build(snapshot: PortfolioSnapshot) -> dict[str, Any]:
        gainers = rank_gainers_losers(snapshot.positions, True)
        losers = rank_gainers_losers(snapshot.positions, False)
        return {
            "gainers": build_gain_loss_series(gainers, True).to_dict(),
            "losers": build_gain_loss_series(losers, False).to_dict(),
        }

    return _with_portfolio(cmd_id, payload, build)


def handle_get_drilldown(cmd_id: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Get the transaction series of one symbol.

    Args:
        cmd_id: Command identifier.
        payload: Portfolio payload plus 'symbol'.

    Returns:
        Success response with the series, INVALID_PARAMS without a symbol,
        or SYMBOL_NOT_FOUND.
    """
    symbol = payload.get("symbol")
    if not symbol:
        return error_response(cmd_id, "INVALID_PARAMS", "symbol is required")

    try:
        snapshot = load_portfolio(payload)
    except PortfolioLoadError as e:
        details = e.issue.to_dict() if e.issue else None
        return error_response(cmd_id, "INVALID_PORTFOLIO", str(e), details)

    index = index_drilldown(snapshot.positions)
    series = index.get(symbol)
    if series is None:
        logger.info(f"Drill-down requested for unknown symbol {symbol}")
        return error_response(cmd_id, "SYMBOL_NOT_FOUND", f"No position for {symbol}")

    return success_response(
        cmd_id, build_drilldown_series(series, snapshot.is_private_mode).to_dict()
    )
