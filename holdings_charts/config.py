import os

from dotenv import load_dotenv

from holdings_charts.models.transaction_type import TransactionColorMap

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ===== LOGGING =====
LOG_LEVEL = os.getenv("HOLDINGS_CHARTS_LOG_LEVEL", "INFO")

# ===== DISPLAY =====
# Default for surfaces that are not handed an explicit isPrivateMode flag
PRIVATE_MODE = _env_flag("HOLDINGS_CHARTS_PRIVATE_MODE")

# Currency the portfolio values are reported in (gain tooltips)
BASE_CURRENCY = os.getenv("HOLDINGS_CHARTS_BASE_CURRENCY", "CAD")
MONEY_SYMBOL = os.getenv("HOLDINGS_CHARTS_MONEY_SYMBOL", "$")

# Transaction colors for the drill-down view, keyed by lower-cased type
DEFAULT_TRANSACTION_COLORS = TransactionColorMap(
    version="2020-06",
    colors={
        "buy": "#2ECC71",
        "sell": "#E74C3C",
        "dividend": "#3498DB",
        "distribution": "#5DADE2",
        "interest": "#9B59B6",
        "deposit": "#16A085",
        "withdrawal": "#D35400",
        "fee": "#7F8C8D",
        "tax": "#95A5A6",
        "transfer": "#F1C40F",
        "split": "#34495E",
        "reinvest": "#1ABC9C",
    },
    default=None,
)
