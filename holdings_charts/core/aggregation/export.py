"""Tabular export of chart data (the charts' "download CSV" action)."""

from typing import Sequence

import pandas as pd

from holdings_charts.core.schema import HoldingsExportSchema
from holdings_charts.models import ChartSeries, HoldingRecord

HOLDINGS_COLUMNS = [
    "symbol",
    "market_value",
    "percentage",
    "gain_percent",
    "profit",
    "average_cost",
    "shares",
    "last_price",
    "currency",
    "accounts",
]

# Markup and nested structures do not belong in a spreadsheet
_SKIPPED_POINT_FIELDS = {"accountsTable", "additionalValue", "accounts", "drilldown"}


def holdings_to_dataframe(holdings: Sequence[HoldingRecord]) -> pd.DataFrame:
    """
    Convert holdings to a DataFrame, one row per position.

    The per-account breakdown is flattened to "name type: quantity" text.

    Args:
        holdings: Holdings from aggregate_holdings()

    Returns:
        DataFrame with HOLDINGS_COLUMNS validated against HoldingsExportSchema
        (empty frame for no holdings)

    Raises:
        pandera.errors.SchemaError: If a record breaks the export contract
    """
    rows = []
    for record in holdings:
        row = record.model_dump(exclude={"accounts"})
        row["accounts"] = "; ".join(
            f"{a.name} {a.type}: {a.quantity:g}" for a in record.accounts
        )
        rows.append(row)

    return HoldingsExportSchema.validate(pd.DataFrame(rows, columns=HOLDINGS_COLUMNS))


def export_holdings_csv(holdings: Sequence[HoldingRecord]) -> str:
    """CSV text of the holdings table, one row per position."""
    return holdings_to_dataframe(holdings).to_csv(index=False)


def series_to_dataframe(series: ChartSeries) -> pd.DataFrame:
    """
    Convert a series' points to a DataFrame.

    Args:
        series: Any chart series

    Returns:
        DataFrame with a "name" and "y" column followed by the display fields
    """
    if not series.data:
        return pd.DataFrame(columns=["name", "y"])

    rows = [
        {k: v for k, v in point.items() if k not in _SKIPPED_POINT_FIELDS}
        for point in series.data
    ]
    df = pd.DataFrame(rows)
    leading = [c for c in ("name", "y") if c in df.columns]
    return df[leading + [c for c in df.columns if c not in leading]]


def export_series_csv(series: ChartSeries) -> str:
    """CSV text of a series, named like the series' y column."""
    df = series_to_dataframe(series).rename(columns={"name": "Category", "y": series.name})
    return df.to_csv(index=False)
