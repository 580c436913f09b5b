"""Handler Registry.

Maps command names to handler functions for the dispatcher.

Handler Naming Convention:
    - Handlers are named `handle_{command_name}`
    - Handlers take (cmd_id, payload) and return `dict[str, Any]`
"""

from typing import Any, Callable

from holdings_charts.headless.handlers.charts import (
    handle_get_backtest_link,
    handle_get_currency_composition,
    handle_get_drilldown,
    handle_get_gainers_losers,
    handle_get_holdings_charts,
)
from holdings_charts.headless.handlers.health import handle_get_health

HandlerFunc = Callable[[int, dict[str, Any]], dict[str, Any]]

HANDLER_REGISTRY: dict[str, HandlerFunc] = {
    "get_health": handle_get_health,
    "get_holdings_charts": handle_get_holdings_charts,
    "get_backtest_link": handle_get_backtest_link,
    "get_currency_composition": handle_get_currency_composition,
    "get_gainers_losers": handle_get_gainers_losers,
    "get_drilldown": handle_get_drilldown,
}

__all__ = [
    "HANDLER_REGISTRY",
    "HandlerFunc",
    "handle_get_health",
    "handle_get_holdings_charts",
    "handle_get_backtest_link",
    "handle_get_currency_composition",
    "handle_get_gainers_losers",
    "handle_get_drilldown",
]
