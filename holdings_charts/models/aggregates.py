"""
Derived aggregate models.

These are produced fresh on every aggregation call and never written
back into the input records.
"""

import datetime as dt
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .portfolio import Transaction


def display_currency(currency: Optional[str]) -> str:
    """Upper-cased currency code for labels; missing codes render literally."""
    return str(currency).upper()


class CurrencyBucket(BaseModel):
    """
    Accumulated cash or stock value for one currency.

    Attributes:
        currency: Lower-cased currency key (None when the source had none)
        kind: "Cash" for account balances, "Stocks" for position values
        value: Accumulated value
        gain: Accumulated unrealized gain (always 0 for cash)
    """

    model_config = ConfigDict(frozen=True)

    currency: Optional[str]
    kind: Literal["Cash", "Stocks"]
    value: float = 0.0
    gain: float = 0.0

    def accumulate(self, value: float, gain: float = 0.0) -> "CurrencyBucket":
        """Return a new bucket with `value` and `gain` added."""
        return self.model_copy(
            update={"value": self.value + value, "gain": self.gain + gain}
        )

    @computed_field
    @property
    def label(self) -> str:
        return f"{display_currency(self.currency)} {self.kind}"

    @computed_field
    @property
    def gain_percent(self) -> float:
        """Gain relative to value, in percent with 2 decimals (0 for zero value)."""
        # Lazy import: formatting depends on this package
        from holdings_charts.core.formatting import round_half_up

        if not self.value:
            return 0.0
        return round_half_up(self.gain / self.value * 100, 2)


class CashAccountEntry(BaseModel):
    """Account contributing to a cash bucket."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    cash: float


@dataclass(frozen=True)
class CurrencyComposition:
    """
    Cash and stock buckets keyed by lower-cased currency code.

    `cash_accounts` lists, per cash bucket key, the accounts holding
    non-zero cash in that currency (largest first).
    """

    stocks: Mapping[Optional[str], CurrencyBucket] = field(
        default_factory=lambda: MappingProxyType({})
    )
    cash: Mapping[Optional[str], CurrencyBucket] = field(
        default_factory=lambda: MappingProxyType({})
    )
    cash_accounts: Mapping[Optional[str], tuple[CashAccountEntry, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    total_value: float = 0.0

    def ordered_buckets(self) -> list[CurrencyBucket]:
        """Stocks first, then cash; each alphabetical by currency code."""
        return _sorted_buckets(self.stocks) + _sorted_buckets(self.cash)


def _sorted_buckets(
    buckets: Mapping[Optional[str], CurrencyBucket],
) -> list[CurrencyBucket]:
    return [buckets[key] for key in sorted(buckets, key=lambda k: str(k or ""))]


class WeightedEntry(BaseModel):
    """A named value with its share of the total in percent."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    percentage: float


class AccountHolding(BaseModel):
    """Quantity of one symbol held in one account."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    quantity: float


class HoldingRecord(BaseModel):
    """
    Enriched per-position record for the holdings charts.

    Attributes:
        symbol: Display symbol
        market_value: Position market value
        percentage: Share of the total portfolio market value (1 decimal)
        gain_percent: Unrealized gain in percent, None when unknown
        profit: Unrealized gain amount
        average_cost: Mean of per-lot unit costs, None without usable lots
        shares: Units held
        last_price: Last traded price
        currency: Upper-cased currency code
        accounts: Accounts holding the symbol, largest quantity first
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    market_value: float
    percentage: float
    gain_percent: Optional[float] = None
    profit: float = 0.0
    average_cost: Optional[float] = None
    shares: float = 0.0
    last_price: Optional[float] = None
    currency: Optional[str] = None
    accounts: list[AccountHolding] = Field(default_factory=list)


class GainLossEntry(BaseModel):
    """Position ranked in the gainers or losers chart."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    gain_percent: float
    gain_amount: float


class DrilldownPoint(BaseModel):
    """
    One transaction rendered in a symbol's drill-down series.

    Attributes:
        name: Date label ("Mar 4, 2021")
        y: Signed transaction amount
        color: Color from the transaction color map, None if unmapped
        display_value: Money-formatted amount
        type: Title-cased transaction type
        price: Trade price, "N/A" for non-trades
        shares: Trade shares, "N/A" for non-trades
        label: "shares@price" for trades, "Type@amount" otherwise
        transaction: Source transaction
    """

    model_config = ConfigDict(frozen=True)

    name: str
    y: float
    color: Optional[str] = None
    display_value: str
    type: str
    price: Union[float, str, None] = None
    shares: Union[float, str, None] = None
    label: str
    transaction: Transaction

    @property
    def date(self) -> dt.date:
        return self.transaction.date


class DrilldownSeries(BaseModel):
    """Transactions of one symbol in stored order."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    currency: Optional[str] = None
    points: list[DrilldownPoint] = Field(default_factory=list)
