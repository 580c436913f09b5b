"""
Holdings Tab - Holdings, Currency and Gainers/Losers charts

Shows the holdings column/pie charts with a per-symbol transaction
drill-down, the USD/CAD composition, and the top gainers and losers.

Run standalone with:
    streamlit run holdings_charts/dashboard/holdings_tab.py
"""

import json
from typing import Any, Optional

import streamlit as st

from holdings_charts.core.aggregation import (
    aggregate_holdings,
    build_holdings_charts,
    index_drilldown,
)
from holdings_charts.core.aggregation.export import (
    export_holdings_csv,
    export_series_csv,
)
from holdings_charts.core.aggregation.series import build_drilldown_series
from holdings_charts.core.converters import (
    PortfolioSnapshot,
    load_portfolio,
    select_timeline_position,
)
from holdings_charts.core.errors import PortfolioLoadError
from holdings_charts.core.formatting import format_money, get_symbol
from holdings_charts.dashboard.figures import options_to_figure, series_to_figure
from holdings_charts.models import ChartOptions, HoldingsCharts
from holdings_charts.utils.logging_config import get_logger

logger = get_logger(__name__)

TIMELINE_SYMBOL_KEY = "holdings_timeline_symbol"
NO_SELECTION = "(none)"


def get_selected_symbol() -> Optional[str]:
    return st.session_state.get(TIMELINE_SYMBOL_KEY)


def select_symbol(symbol: Optional[str]) -> None:
    """Store the symbol whose transactions are shown (None clears it)."""
    st.session_state[TIMELINE_SYMBOL_KEY] = symbol


def _clicked_point(event: Any) -> Optional[str]:
    """Name of the first selected point of a plotly selection event."""
    if not event:
        return None
    selection = event.get("selection") if isinstance(event, dict) else getattr(event, "selection", None)
    if not selection:
        return None
    points = selection.get("points") if isinstance(selection, dict) else getattr(selection, "points", None)
    if not points:
        return None
    point = points[0]
    return point.get("x") or point.get("label")


def render_chart(options: ChartOptions, key: str) -> None:
    """Draw a chart and forward point clicks to its series' click handler."""
    event = st.plotly_chart(
        options_to_figure(options),
        use_container_width=True,
        key=key,
        on_select="rerun",
    )
    clicked = _clicked_point(event)
    # The selection persists across reruns; only forward new clicks
    last_key = f"{key}_last_click"
    if clicked is None or st.session_state.get(last_key) == clicked:
        return
    st.session_state[last_key] = clicked
    for series in options.series:
        series.click(clicked)


def render_drilldown(snapshot: PortfolioSnapshot) -> None:
    """Render the transaction column chart of the selected symbol."""
    symbols = [get_symbol(p.security) for p in snapshot.positions]
    selected = get_selected_symbol()
    options = [NO_SELECTION] + symbols
    index = options.index(selected) if selected in options else 0

    choice = st.selectbox("Show transactions for", options, index=index)
    chosen = None if choice == NO_SELECTION else choice
    if chosen != selected:
        select_symbol(chosen)

    position = select_timeline_position(snapshot.positions, chosen)
    if position is None:
        return

    drilldown = index_drilldown([position]).get(chosen)
    if drilldown is None or not drilldown.points:
        st.info(f"No transactions recorded for {chosen}")
        return

    st.plotly_chart(
        series_to_figure(
            build_drilldown_series(drilldown, snapshot.is_private_mode),
            is_private_mode=snapshot.is_private_mode,
            title=f"{chosen} Transactions",
        ),
        use_container_width=True,
    )
    if not snapshot.is_private_mode:
        st.caption(
            f"Market value {format_money(position.market_value)} "
            f"({position.currency or 'N/A'})"
        )


def render_holdings(charts: HoldingsCharts, snapshot: PortfolioSnapshot) -> None:
    with st.expander("Holdings Chart", expanded=True):
        view = st.radio("View", ["Column", "Pie"], horizontal=True)
        options = charts.holdings_column if view == "Column" else charts.holdings_pie
        st.caption(options.subtitle)
        render_chart(options, key=f"holdings_{view.lower()}")

        render_drilldown(snapshot)

        st.download_button(
            "Download CSV",
            export_holdings_csv(aggregate_holdings(snapshot.positions, snapshot.accounts)),
            file_name="holdings.csv",
            mime="text/csv",
            key="holdings_csv",
        )

    st.link_button("Portfolio Visualizer", charts.backtest_url)


def render_currency(charts: HoldingsCharts) -> None:
    with st.expander("USD/CAD Composition"):
        render_chart(charts.currency_composition, key="currency_composition")
        st.download_button(
            "Download CSV",
            export_series_csv(charts.currency_composition.series[0]),
            file_name="currency_composition.csv",
            mime="text/csv",
            key="currency_csv",
        )


def render_gainers_losers(charts: HoldingsCharts) -> None:
    with st.expander("Top Losers/Gainers Chart"):
        col1, col2 = st.columns(2)
        with col1:
            if charts.top_losers.series[0].data:
                render_chart(charts.top_losers, key="top_losers")
            else:
                st.info("No losing positions")
        with col2:
            if charts.top_gainers.series[0].data:
                render_chart(charts.top_gainers, key="top_gainers")
            else:
                st.info("No winning positions")


def render(snapshot: PortfolioSnapshot) -> None:
    """Main render function for the Holdings tab."""
    st.header("Holdings")

    if not snapshot.positions:
        st.warning("No positions in this portfolio.")
        return

    charts = build_holdings_charts(
        snapshot.positions,
        snapshot.accounts,
        snapshot.is_private_mode,
        on_select=select_symbol,
    )

    render_holdings(charts, snapshot)
    render_currency(charts)
    render_gainers_losers(charts)


def render_page() -> None:
    """Standalone page: upload a portfolio JSON file and show the tab."""
    st.set_page_config(page_title="Holdings Charts", layout="wide")
    st.title("Holdings Charts")

    uploaded = st.file_uploader("Portfolio JSON", type=["json"])
    if uploaded is None:
        st.info("Upload a portfolio file ({positions, accounts, isPrivateMode}).")
        return

    try:
        snapshot = load_portfolio(json.load(uploaded))
    except json.JSONDecodeError as e:
        st.error(f"Not a valid JSON file: {e}")
        return
    except PortfolioLoadError as e:
        logger.warning(f"Rejected uploaded portfolio: {e}")
        st.error(str(e))
        return

    render(snapshot)


if __name__ == "__main__":
    render_page()
