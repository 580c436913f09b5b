"""
Series assembly for the rendering engine.

Turns the aggregates into series/option objects. Numbers stay numeric in
`y`; everything the tooltips show is pre-formatted here. This is the
only place that builds tooltip markup.
"""

from typing import Any, Mapping, Optional, Sequence

from holdings_charts import config
from holdings_charts.core.formatting import (
    format_amount,
    format_currency,
    format_money,
    format_number,
)
from holdings_charts.models import (
    AccountHolding,
    CashAccountEntry,
    ChartOptions,
    ChartSeries,
    ClickHandler,
    CurrencyComposition,
    DrilldownSeries,
    GainLossEntry,
    HoldingRecord,
)

HOLDINGS_SERIES_NAME = "Holdings"
CURRENCY_SERIES_NAME = "USD vs CAD"

_HOLDING_DETAILS = """<tr><td>Gain</td><td align="right">{point.gain:.1f}%</td></tr>
            <tr><td>Profit</td><td align="right">{point.profit}</td></tr>
            <tr><td>Shares</td><td align="right">{point.shares}</td></tr>
            <tr><td>Currency</td><td align="right">{point.currency}</td></tr>
            <tr><td>Buy Price</td><td align="right">{point.buyPrice}</td></tr>
            <tr><td>Last Price</td><td align="right">{point.lastPrice}</td></tr>"""

COLUMN_TOOLTIP = f"""<b>{{point.marketValue}}</b><br /><br />
          <table width="100%">
            <tr><td>Weightage</td><td align="right">{{point.percentage:.1f}}%</td></tr>
            {_HOLDING_DETAILS}
          </table>
          <br />{{point.accountsTable}}
          """

PIE_TOOLTIP = f"""<b>{{point.percentage:.1f}}%</b><br /><br />
          <table width="100%">
            <tr><td>Value</td><td align="right">{{point.marketValue}}</td></tr>
            {_HOLDING_DETAILS}
          </table>
          <br />{{point.accountsTable}}
          """

CURRENCY_TOOLTIP = """<b>{point.percentage:.1f}%</b><br /><br />
        <table><tr><td>Value</td><td align="right">${point.displayValue}</td></tr>
        <tr><td>Total Value</td><td align="right">${point.totalValue}</td></tr>
        <tr><td colspan="2">======================</td></tr>
        {point.additionalValue}
        </table>"""

DRILLDOWN_TOOLTIP = """<b>{point.label}</b>
            <br />Type: {point.type}"""


def accounts_table(accounts: Sequence[AccountHolding]) -> str:
    rows = "".join(
        f'<tr><td>{a.name} {a.type}</td><td align="right">{format_number(a.quantity)}</td></tr>'
        for a in accounts
    )
    return f'<table><tr><th>Account</th><th align="right">Shares</th></tr>{rows}</table>'


def cash_accounts_rows(accounts: Sequence[CashAccountEntry]) -> str:
    return "".join(
        f'<tr><td>{a.name} {a.type}</td><td align="right">${format_amount(a.cash)}</td></tr>'
        for a in accounts
    )


def holding_point(record: HoldingRecord) -> dict[str, Any]:
    """Point for the holdings column/pie charts."""
    return {
        "name": record.symbol,
        "y": record.market_value,
        "drilldown": record.symbol,
        "displayValue": format_currency(record.market_value, 1),
        "marketValue": format_money(record.market_value),
        "percentage": record.percentage,
        "gain": record.gain_percent,
        "profit": format_money(record.profit),
        "buyPrice": format_money(record.average_cost),
        "shares": record.shares,
        "lastPrice": format_money(record.last_price),
        "currency": record.currency,
        "accounts": [a.model_dump() for a in record.accounts],
        "accountsTable": accounts_table(record.accounts),
    }


def build_positions_series(
    holdings: Sequence[HoldingRecord],
    is_private_mode: bool = False,
    on_select: Optional[ClickHandler] = None,
) -> tuple[ChartSeries, ChartSeries]:
    """
    Column and pie series of the holdings.

    Args:
        holdings: Ranked holdings from aggregate_holdings()
        is_private_mode: Hide value data labels on the column chart
        on_select: Called with the clicked symbol

    Returns:
        (column series, pie series) sharing the same points
    """
    data = [holding_point(record) for record in holdings]

    column = ChartSeries(
        type="column",
        name=HOLDINGS_SERIES_NAME,
        color_by_point=True,
        data=data,
        tooltip={"useHTML": True, "pointFormat": COLUMN_TOOLTIP, "valueDecimals": 1},
        data_labels={"enabled": not is_private_mode, "format": "{point.displayValue}"},
        show_in_legend=False,
        on_click=on_select,
    )
    pie = ChartSeries(
        type="pie",
        name=HOLDINGS_SERIES_NAME,
        color_by_point=True,
        data=[{**point, "drilldown": None} for point in data],
        tooltip={"useHTML": True, "pointFormat": PIE_TOOLTIP},
        on_click=on_select,
    )
    return column, pie


def build_gain_loss_series(
    entries: Sequence[GainLossEntry],
    gainers: bool,
    base_currency: Optional[str] = None,
) -> ChartSeries:
    """Column series for the top gainers or top losers chart."""
    base_currency = base_currency or config.BASE_CURRENCY
    caption = "Gain" if gainers else "Loss"
    return ChartSeries(
        type="column",
        name="Top Gainers" if gainers else "Top Losers",
        color_by_point=True,
        data=[
            {
                "name": entry.symbol,
                "y": entry.gain_percent,
                "gain": format_money(entry.gain_amount),
            }
            for entry in entries
        ],
        tooltip={
            "pointFormat": f"<b>{{point.y:.1f}}%</b><br />{caption}: {{point.gain}} {base_currency}"
        },
        data_labels={"enabled": True, "format": "{point.y:.1f}"},
        show_in_legend=False,
    )


def build_currency_series(composition: CurrencyComposition) -> ChartSeries:
    """Pie series of stock and cash value per currency."""
    total_value = format_amount(composition.total_value)

    data = []
    for bucket in composition.ordered_buckets():
        if bucket.kind == "Stocks":
            additional = (
                f'<tr><td>Gain ($) </td><td align="right">{format_money(bucket.gain)}</td></tr>'
                f'<tr><td>Gain (%)</td><td align="right">{bucket.gain_percent:.2f}</td></tr>'
            )
        else:
            additional = cash_accounts_rows(
                composition.cash_accounts.get(bucket.currency, ())
            )
        data.append(
            {
                "name": bucket.label,
                "y": bucket.value,
                "kind": bucket.kind,
                "gain": bucket.gain,
                "gainPercent": bucket.gain_percent,
                "displayValue": format_amount(bucket.value),
                "totalValue": total_value,
                "additionalValue": additional,
            }
        )

    return ChartSeries(
        type="pie",
        name=CURRENCY_SERIES_NAME,
        color_by_point=True,
        data=data,
        tooltip={"useHTML": True, "pointFormat": CURRENCY_TOOLTIP},
    )


def build_drilldown_series(
    drilldown: DrilldownSeries, is_private_mode: bool = False
) -> ChartSeries:
    return ChartSeries(
        type="column",
        id=drilldown.id,
        name=drilldown.name,
        data=[
            {
                "name": point.name,
                "y": point.y,
                "color": point.color,
                "displayValue": point.display_value,
                "type": point.type,
                "price": point.price,
                "shares": point.shares,
                "label": point.label,
                "date": point.date.isoformat(),
            }
            for point in drilldown.points
        ],
        tooltip={"useHTML": True, "pointFormat": DRILLDOWN_TOOLTIP, "valueDecimals": 1},
        data_labels={"enabled": not is_private_mode, "format": "{point.label}"},
    )


def build_drilldown(
    index: Mapping[str, DrilldownSeries], is_private_mode: bool = False
) -> dict[str, Any]:
    """Drill-down block with one transaction series per symbol."""
    return {
        "activeAxisLabelStyle": {"textDecoration": "none"},
        "activeDataLabelStyle": {"textDecoration": "none"},
        "series": [
            build_drilldown_series(series, is_private_mode).to_dict()
            for series in index.values()
        ],
    }


def build_chart_options(
    series: Sequence[ChartSeries],
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    y_axis_title: Optional[str] = None,
    drilldown: Optional[dict[str, Any]] = None,
    is_private_mode: bool = False,
) -> ChartOptions:
    return ChartOptions(
        series=list(series),
        title=title,
        subtitle=subtitle,
        y_axis_title=y_axis_title,
        drilldown=drilldown or {},
        is_private_mode=is_private_mode,
    )
