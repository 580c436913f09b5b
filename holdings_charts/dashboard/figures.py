"""
Plotly rendering of the chart options.

Column series become go.Bar traces and pie series go.Pie traces. Point
labels reuse the series' data-label templates ("{point.displayValue}",
"{point.y:.1f}"), so the figure shows the same text as the options.
"""

import re
from typing import Any, Mapping, Optional

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from holdings_charts.core.formatting import NOT_AVAILABLE
from holdings_charts.models import ChartOptions, ChartSeries

_POINT_FIELD = re.compile(r"\{point\.(\w+)(?::([^}]+))?\}")

# First available field is shown under the point name on hover
_HOVER_FIELDS = ("marketValue", "label", "gain", "displayValue")


def render_point_format(template: str, point: Mapping[str, Any]) -> str:
    """Fill a "{point.field:fmt}" template from a point dict."""

    def substitute(match: "re.Match[str]") -> str:
        value = point.get(match.group(1))
        fmt = match.group(2)
        if value is None:
            return NOT_AVAILABLE if fmt else ""
        if fmt:
            try:
                return format(value, fmt)
            except (TypeError, ValueError):
                return str(value)
        return str(value)

    return _POINT_FIELD.sub(substitute, template)


def hover_text(point: Mapping[str, Any]) -> str:
    lines = [f"<b>{point.get('name')}</b>"]
    for field in _HOVER_FIELDS:
        if point.get(field) is not None:
            lines.append(str(point[field]))
            break
    if point.get("type") and point.get("label"):
        lines.append(f"Type: {point['type']}")
    return "<br>".join(lines)


def series_to_trace(series: ChartSeries, is_private_mode: bool = False) -> BaseTraceType:
    """
    Convert one series to a plotly trace.

    Args:
        series: Column or pie series
        is_private_mode: Hide value labels on columns

    Returns:
        go.Bar for column series, go.Pie for pie series
    """
    names = [point.get("name") for point in series.data]
    values = [point.get("y") for point in series.data]
    hover = [hover_text(point) for point in series.data]

    if series.type == "pie":
        return go.Pie(
            name=series.name,
            labels=names,
            values=values,
            hovertext=hover,
            hoverinfo="text",
            textinfo="label+percent",
            sort=False,
        )

    labels_enabled = bool(series.data_labels and series.data_labels.get("enabled"))
    text = None
    if labels_enabled and not is_private_mode:
        template = series.data_labels.get("format", "{point.y}")
        text = [render_point_format(template, point) for point in series.data]

    colors = [point.get("color") for point in series.data]
    marker = {"color": colors} if any(colors) else None

    return go.Bar(
        name=series.name,
        x=names,
        y=values,
        text=text,
        textposition="outside" if text else "none",
        hovertext=hover,
        hoverinfo="text",
        marker=marker,
        showlegend=bool(series.show_in_legend),
    )


def series_to_figure(
    series: ChartSeries,
    is_private_mode: bool = False,
    title: Optional[str] = None,
    y_axis_title: Optional[str] = None,
) -> go.Figure:
    return options_to_figure(
        ChartOptions(
            series=[series],
            title=title,
            y_axis_title=y_axis_title,
            is_private_mode=is_private_mode,
        )
    )


def options_to_figure(options: ChartOptions) -> go.Figure:
    """
    Convert chart options to a plotly figure.

    The title and value axis follow the options; private mode hides value
    labels and the value axis tick labels.
    """
    fig = go.Figure(
        [series_to_trace(s, options.is_private_mode) for s in options.series]
    )
    fig.update_layout(
        title=options.title,
        height=450,
        margin=dict(l=20, r=20, t=40 if options.title else 20, b=20),
    )
    if any(s.type == "column" for s in options.series):
        fig.update_xaxes(type="category", tickangle=-45)
        fig.update_yaxes(
            showticklabels=not options.is_private_mode, title=options.y_axis_title
        )
    return fig
