from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Known transaction kinds. Raw strings outside this set are still accepted."""

    BUY = "buy"
    SELL = "sell"
    DIVIDEND = "dividend"
    DISTRIBUTION = "distribution"
    INTEREST = "interest"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    FEE = "fee"
    TAX = "tax"
    TRANSFER = "transfer"
    SPLIT = "split"
    REINVEST = "reinvest"
    OTHER = "other"


class AccountType(str, Enum):
    """Common account categories."""

    TFSA = "TFSA"
    RRSP = "RRSP"
    RESP = "RESP"
    LIRA = "LIRA"
    FHSA = "FHSA"
    MARGIN = "Margin"
    CASH = "Cash"


TRADE_TYPES = frozenset({TransactionType.BUY, TransactionType.SELL})


def normalize_transaction_type(
    value: Union[str, TransactionType, None],
) -> Optional[TransactionType]:
    """Map a raw transaction type onto the enum.

    Args:
        value: Raw type string (e.g. "Buy", "DIVIDEND")

    Returns:
        Matching TransactionType, or None for unknown kinds

    Examples:
        >>> normalize_transaction_type("Buy")
        TransactionType.BUY
        >>> normalize_transaction_type("journal") is None
        True
    """
    if value is None:
        return None

    if isinstance(value, TransactionType):
        return value

    try:
        return TransactionType(value.lower().strip())
    except ValueError:
        return None


def is_trade(transaction_type: Optional[str]) -> bool:
    """True for buy/sell, compared case-insensitively."""
    return normalize_transaction_type(transaction_type) in TRADE_TYPES


class TransactionColorMap(BaseModel):
    """
    Versioned transaction-type to color table.

    Lookups are keyed by the lower-cased type and fall back to `default`
    for anything unmapped.

    Attributes:
        version: Identifier of this palette revision
        colors: Lower-case transaction type -> CSS color
        default: Color for unmapped types (None lets the renderer decide)
    """

    model_config = ConfigDict(frozen=True)

    version: str = "1"
    colors: dict[str, str] = Field(default_factory=dict)
    default: Optional[str] = None

    def color_for(self, transaction_type: Optional[str]) -> Optional[str]:
        if not transaction_type:
            return self.default
        return self.colors.get(transaction_type.lower(), self.default)
