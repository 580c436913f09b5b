"""
Display formatting helpers shared by the aggregators and series builders.

Numbers are rendered the way the charting front-end shows them: integral
floats without a trailing ".0", money with two decimals and thousands
separators.
"""

import datetime as dt
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from holdings_charts import config
from holdings_charts.models import Security

NOT_AVAILABLE = "N/A"

_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Round `value` to `digits` decimals, ties away from zero.

    Operates on the exact binary value of the float, so 1.005 rounds to
    1.0 at two digits exactly like toFixed() in the browser.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded float (non-finite values are returned unchanged)
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: Union[int, float, None]) -> str:
    """Plain number text: 10.0 -> "10", 5.25 -> "5.25"."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_money(
    value: Optional[float], decimals: int = 2, symbol: Optional[str] = None
) -> str:
    """
    Money text with thousands separators: 1234.5 -> "$1,234.50".

    Args:
        value: Amount, None renders as "N/A"
        decimals: Fraction digits
        symbol: Currency symbol, defaults to the configured MONEY_SYMBOL

    Returns:
        Formatted amount, sign in front of the symbol for negatives
    """
    if value is None:
        return NOT_AVAILABLE
    symbol = config.MONEY_SYMBOL if symbol is None else symbol
    rounded = round_half_up(value, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"


def format_amount(value: Optional[float]) -> str:
    """Amount rounded to cents without trailing zeros: 1234.50 -> "1,234.5"."""
    if value is None:
        return NOT_AVAILABLE
    text = f"{round_half_up(value, 2):,.2f}"
    return text.rstrip("0").rstrip(".")


def format_currency(value: Optional[float], decimals: int = 1) -> str:
    """Compact value for data labels: 1234 -> "1.2K", 2500000 -> "2.5M"."""
    if value is None:
        return NOT_AVAILABLE
    magnitude = abs(value)
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if magnitude >= threshold:
            return f"{round_half_up(value / threshold, decimals):.{decimals}f}{suffix}"
    return f"{round_half_up(value, decimals):.{decimals}f}"


def start_case(text: Optional[str]) -> str:
    """
    Split into words and capitalize each one.

    Examples:
        >>> start_case("dividend")
        'Dividend'
        >>> start_case("buyToCover")
        'Buy To Cover'
        >>> start_case("deposit_withdrawal")
        'Deposit Withdrawal'
    """
    if not text:
        return ""
    words = _WORD_PATTERN.findall(text)
    return " ".join(word[0].upper() + word[1:] for word in words)


def format_date_label(value: dt.date) -> str:
    """Short date label: 2021-03-04 -> "Mar 4, 2021"."""
    return f"{value:%b} {value.day}, {value.year}"


def get_symbol(security: Security) -> str:
    """Display symbol for a security."""
    return security.symbol.strip()
