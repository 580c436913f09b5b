"""
Portfolio Visualizer backtest link.

The backtesting service reads the portfolio from numbered query
parameters: symbol1=QD&allocation1_1=1&symbol2=TTD&allocation2_1=15 ...
The analysis settings in front of them are a fixed contract.
"""

from typing import Sequence, Union
from urllib.parse import urlencode

from holdings_charts.core.formatting import format_number
from holdings_charts.models import HoldingRecord

from .weights import normalize_weights

BACKTEST_BASE_URL = "https://www.portfoliovisualizer.com/backtest-portfolio"

BACKTEST_FIXED_PARAMS: tuple[tuple[str, str], ...] = (
    ("s", "y"),
    ("timePeriod", "4"),
    ("initialAmount", "10000"),
    ("annualOperation", "0"),
    ("annualAdjustment", "0"),
    ("inflationAdjusted", "true"),
    ("annualPercentage", "0.0"),
    ("frequency", "4"),
    ("rebalanceType", "1"),
    ("showYield", "false"),
    ("reinvestDividends", "true"),
)

BACKTEST_ANCHOR = "analysisResults"


def encode_portfolio_weights(
    holdings: Sequence[HoldingRecord],
) -> dict[str, Union[str, float]]:
    """
    Map ranked holdings to numbered symbol/allocation parameters.

    Weights come from normalize_weights over the holdings' market values
    in the given order, so the last (smallest) holding absorbs the
    rounding residual and the allocations add up to 100.

    Args:
        holdings: Holdings as returned by aggregate_holdings()

    Returns:
        Ordered mapping {"symbol1": ..., "allocation1_1": ..., ...}
    """
    weights = normalize_weights([h.market_value for h in holdings])

    params: dict[str, Union[str, float]] = {}
    for index, (holding, weight) in enumerate(zip(holdings, weights), start=1):
        params[f"symbol{index}"] = holding.symbol
        params[f"allocation{index}_1"] = weight
    return params


def to_query_string(params: dict[str, Union[str, float]]) -> str:
    """URL-encode parameters, numbers without a trailing ".0"."""
    return urlencode(
        [
            (key, value if isinstance(value, str) else format_number(value))
            for key, value in params.items()
        ]
    )


def build_backtest_url(holdings: Sequence[HoldingRecord]) -> str:
    """
    Full backtest link for the portfolio.

    Args:
        holdings: Holdings as returned by aggregate_holdings()

    Returns:
        URL with fixed analysis settings followed by the portfolio weights
    """
    query = urlencode(BACKTEST_FIXED_PARAMS)
    portfolio = to_query_string(encode_portfolio_weights(holdings))
    if portfolio:
        query = f"{query}&{portfolio}"
    return f"{BACKTEST_BASE_URL}?{query}#{BACKTEST_ANCHOR}"
