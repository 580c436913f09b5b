"""Cash and stock value grouped by currency."""

from functools import reduce
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Sequence

from holdings_charts.core.formatting import round_half_up
from holdings_charts.models import (
    Account,
    CashAccountEntry,
    CurrencyBucket,
    CurrencyComposition,
    Position,
)
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)

BucketMap = Mapping[Optional[str], CurrencyBucket]


def currency_key(currency: Optional[str]) -> Optional[str]:
    """Case-insensitive grouping key; missing codes are kept as-is."""
    return currency.lower() if currency else currency


def _fold(
    buckets: dict[Optional[str], CurrencyBucket],
    currency: Optional[str],
    kind: Literal["Cash", "Stocks"],
    value: float,
    gain: float = 0.0,
) -> dict[Optional[str], CurrencyBucket]:
    key = currency_key(currency)
    current = buckets.get(key) or CurrencyBucket(currency=key, kind=kind)
    return {**buckets, key: current.accumulate(value, gain)}


def group_cash_by_currency(accounts: Sequence[Account]) -> BucketMap:
    """
    Sum account cash balances per currency.

    Args:
        accounts: Accounts with cash balances

    Returns:
        Read-only mapping of currency key -> "Cash" bucket
    """
    buckets = reduce(
        lambda acc, account: _fold(acc, account.currency, "Cash", account.cash),
        accounts,
        {},
    )
    return MappingProxyType(buckets)


def group_stocks_by_currency(positions: Sequence[Position]) -> BucketMap:
    """
    Sum position market values and gains per security currency.

    Args:
        positions: Portfolio positions

    Returns:
        Read-only mapping of currency key -> "Stocks" bucket
    """
    buckets = reduce(
        lambda acc, position: _fold(
            acc,
            position.security.currency,
            "Stocks",
            position.market_value,
            position.gain_amount,
        ),
        positions,
        {},
    )
    return MappingProxyType(buckets)


def cash_accounts_for(
    accounts: Sequence[Account], currency: Optional[str]
) -> tuple[CashAccountEntry, ...]:
    """Accounts with non-zero cash in `currency`, largest balance first."""
    key = currency_key(currency)
    matching = [
        account
        for account in accounts
        if currency_key(account.currency) == key and account.cash
    ]
    matching.sort(key=lambda account: account.cash, reverse=True)
    return tuple(
        CashAccountEntry(name=a.name, type=a.type, cash=a.cash) for a in matching
    )


def group_by_currency(
    accounts: Sequence[Account], positions: Sequence[Position]
) -> CurrencyComposition:
    """
    Build the cash/stock composition of the portfolio by currency.

    Args:
        accounts: Accounts providing cash balances
        positions: Positions providing stock values and gains

    Returns:
        CurrencyComposition with buckets, contributing cash accounts and
        the portfolio total rounded to cents
    """
    cash = group_cash_by_currency(accounts)
    stocks = group_stocks_by_currency(positions)

    total = sum(b.value for b in stocks.values()) + sum(b.value for b in cash.values())
    cash_accounts = {key: cash_accounts_for(accounts, key) for key in cash}

    logger.debug(
        f"Grouped {len(positions)} positions into {len(stocks)} stock buckets "
        f"and {len(accounts)} accounts into {len(cash)} cash buckets"
    )

    return CurrencyComposition(
        stocks=stocks,
        cash=cash,
        cash_accounts=MappingProxyType(cash_accounts),
        total_value=round_half_up(total, 2),
    )
