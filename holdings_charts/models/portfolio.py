"""
Portfolio input models.

Defines the read-only records handed over by the data-loading side:
securities, lots, transactions, positions and accounts. Every model is
frozen; aggregation code builds new objects instead of mutating these.
"""

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Security(BaseModel):
    """
    Reference data for a traded instrument.

    Attributes:
        symbol: Ticker symbol as displayed (e.g. "SHOP.TO")
        currency: Trading currency code, any case (e.g. "cad")
        last_price: Last traded price in the security's currency
        name: Optional descriptive name
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    symbol: str = Field(..., min_length=1)
    currency: Optional[str] = None
    last_price: Optional[float] = None
    name: Optional[str] = None


class Investment(BaseModel):
    """One lot of a position: what was paid (book value) for how many units."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    book_value: float
    quantity: float


class Transaction(BaseModel):
    """
    Historical activity record attached to a position.

    `type` is kept as the raw string so that unknown activity kinds still
    flow through to the drill-down view; see TransactionType for the
    known values.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    date: dt.date
    amount: float = 0.0
    price: Optional[float] = None
    shares: Optional[float] = None
    currency: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        """
        Accept ISO dates as well as full ISO timestamps.

        Args:
            v: date, datetime or ISO-8601 string

        Returns:
            A value pydantic can coerce into a date
        """
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return dt.datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        return v


class Position(BaseModel):
    """
    A single security holding aggregated across accounts.

    Attributes:
        security: The held security
        investments: Lots making up the cost basis
        transactions: Activity in insertion (chronological) order
        market_value: Current value in the portfolio's base currency
        quantity: Total units held
        gain_amount: Unrealized gain in the base currency
        gain_percent: Unrealized gain as a fraction (0.12 == 12%), None if unknown
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    security: Security
    investments: list[Investment] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)
    market_value: float = 0.0
    quantity: float = 0.0
    gain_amount: float = 0.0
    gain_percent: Optional[float] = None

    @property
    def symbol(self) -> str:
        return self.security.symbol

    @property
    def currency(self) -> Optional[str]:
        return self.security.currency


class AccountPosition(BaseModel):
    """Per-account holding of a symbol (quantity only)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    symbol: str
    quantity: float = 0.0


class Account(BaseModel):
    """
    Brokerage account with its cash balance and per-symbol holdings.

    Attributes:
        name: Display name or number of the account
        type: Account category (see AccountType for common values)
        currency: Currency of the cash balance
        cash: Cash balance
        positions: Sub-positions used for cross-account weighting
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    type: str = ""
    currency: Optional[str] = None
    cash: float = 0.0
    positions: list[AccountPosition] = Field(default_factory=list)

    def quantity_of(self, symbol: str) -> Optional[float]:
        """
        Quantity of `symbol` held in this account.

        Returns:
            Quantity of the first matching sub-position, None if not held
        """
        for position in self.positions:
            if position.symbol == symbol:
                return position.quantity
        return None
