"""Percentage weights that always add up to 100."""

import math
from typing import Optional, Sequence

from holdings_charts.core.formatting import round_half_up
from holdings_charts.models import WeightedEntry
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)

FULL_WEIGHT = 100.0


def normalize_weights(
    values: Sequence[float], total: Optional[float] = None, digits: int = 1
) -> list[float]:
    """
    Convert values into percentages of `total` rounded to `digits` decimals.

    Each percentage is rounded on its own, then the last entry absorbs
    whatever rounding residual is left so the list sums to exactly 100.

    Args:
        values: Raw magnitudes in encounter order
        total: Denominator, defaults to sum(values)
        digits: Decimal places of each percentage

    Returns:
        Percentages in the same order; all zeros when the total is zero
    """
    if not values:
        return []

    if total is None:
        total = math.fsum(values)

    if not total or not math.isfinite(total):
        logger.debug(f"Zero or non-finite total ({total}); weights default to 0")
        return [0.0] * len(values)

    weights = [round_half_up(value / total * 100, digits) for value in values]

    remaining = FULL_WEIGHT
    for weight in weights:
        remaining = round_half_up(remaining - weight, digits)

    if remaining:
        logger.debug(f"Correcting last weight by {remaining} to reach 100%")
    weights[-1] = round_half_up(weights[-1] + remaining, digits)

    return weights


def weight_entries(
    named_values: Sequence[tuple[str, float]], total: Optional[float] = None
) -> list[WeightedEntry]:
    """
    Pair names with their normalized percentage.

    Args:
        named_values: (name, value) pairs in encounter order
        total: Denominator, defaults to the sum of the values

    Returns:
        One WeightedEntry per pair
    """
    percentages = normalize_weights([value for _, value in named_values], total)
    return [
        WeightedEntry(name=name, value=value, percentage=percentage)
        for (name, value), percentage in zip(named_values, percentages)
    ]
