"""Top gainers and losers."""

from typing import Sequence

from holdings_charts.core.formatting import get_symbol
from holdings_charts.models import GainLossEntry, Position

from .holdings import gain_percent_display


def is_gainer(position: Position) -> bool:
    return position.gain_percent is not None and position.gain_percent > 0


def is_loser(position: Position) -> bool:
    return position.gain_percent is not None and position.gain_percent <= 0


def rank_gainers_losers(
    positions: Sequence[Position], gainers: bool
) -> list[GainLossEntry]:
    """
    Select gainers (gain > 0) or losers (gain <= 0), worst to best.

    Both partitions are sorted ascending on the signed gain, so gainers
    start with the smallest gain and losers with the deepest loss.
    Positions without a gain_percent belong to neither partition.

    Args:
        positions: Portfolio positions
        gainers: True for gainers, False for losers

    Returns:
        Ranked entries (possibly empty)
    """
    selected = [p for p in positions if (is_gainer(p) if gainers else is_loser(p))]
    selected.sort(key=lambda p: p.gain_percent)

    return [
        GainLossEntry(
            symbol=get_symbol(p.security),
            gain_percent=gain_percent_display(p.gain_percent),
            gain_amount=p.gain_amount,
        )
        for p in selected
    ]
