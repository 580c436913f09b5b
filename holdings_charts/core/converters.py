"""Raw payload to portfolio model converters."""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from holdings_charts import config
from holdings_charts.core.errors import ChartIssue, ErrorPhase, PortfolioLoadError
from holdings_charts.core.formatting import get_symbol
from holdings_charts.models import Account, Position
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Positions and accounts of one render pass."""

    positions: List[Position] = field(default_factory=list)
    accounts: List[Account] = field(default_factory=list)
    is_private_mode: bool = False


def _convert_records(
    records: Optional[Iterable[Any]], model_class: Type[T], kind: str
) -> List[T]:
    converted: List[T] = []
    for index, record in enumerate(records or []):
        if isinstance(record, model_class):
            converted.append(record)
            continue
        try:
            converted.append(model_class.model_validate(record))
        except ValidationError as e:
            first = e.errors()[0] if e.errors() else {}
            location = ".".join(str(part) for part in first.get("loc", ()))
            issue = ChartIssue(
                phase=ErrorPhase.LOADING,
                item=f"{kind}[{index}]",
                field=location or None,
                message=first.get("msg", str(e)),
            )
            logger.warning(f"Rejected {issue.item}: {issue.message} ({location})")
            raise PortfolioLoadError(
                f"Invalid {kind}[{index}]: {issue.message}", issue
            ) from e
    return converted


def records_to_positions(records: Optional[Iterable[Any]]) -> List[Position]:
    """
    Build Position models from raw dicts.

    Raises:
        PortfolioLoadError: If a record fails validation
    """
    return _convert_records(records, Position, "positions")


def records_to_accounts(records: Optional[Iterable[Any]]) -> List[Account]:
    """
    Build Account models from raw dicts.

    Raises:
        PortfolioLoadError: If a record fails validation
    """
    return _convert_records(records, Account, "accounts")


def load_portfolio(payload: dict[str, Any]) -> PortfolioSnapshot:
    """
    Read a command payload into a PortfolioSnapshot.

    Args:
        payload: Dict with "positions", "accounts" and optional "isPrivateMode"

    Returns:
        PortfolioSnapshot (private mode defaults to the configured value)

    Raises:
        PortfolioLoadError: If a record fails validation
    """
    private_mode = payload.get("isPrivateMode")
    return PortfolioSnapshot(
        positions=records_to_positions(payload.get("positions")),
        accounts=records_to_accounts(payload.get("accounts")),
        is_private_mode=config.PRIVATE_MODE if private_mode is None else bool(private_mode),
    )


def select_timeline_position(
    positions: Sequence[Position], symbol: Optional[str]
) -> Optional[Position]:
    """The position behind a drilled-down symbol, or None."""
    if not symbol:
        return None
    for position in positions:
        if get_symbol(position.security) == symbol:
            return position
    return None
