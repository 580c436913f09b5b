"""
Chart payload models handed to the rendering side.

Field names are snake_case in Python; `to_dict()` produces the camelCase
option objects the charting engine expects.
"""

from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ClickHandler = Callable[[Optional[str]], None]


class ChartSeries(BaseModel):
    """
    One series (column or pie) with its points and display options.

    Attributes:
        type: "column" or "pie"
        name: Series name shown in legends and tooltips
        data: Point dicts, each with at least `name` and `y`
        id: Series id (drill-down series are addressed by symbol)
        color_by_point: Give each point its own color
        tooltip: Tooltip options (templates reference point fields)
        data_labels: Data-label options
        show_in_legend: Legend visibility, None leaves the engine default
        on_click: Called with the clicked point's name
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: Literal["column", "pie"]
    name: str
    data: list[dict[str, Any]] = Field(default_factory=list)
    id: Optional[str] = None
    color_by_point: bool = False
    tooltip: dict[str, Any] = Field(default_factory=dict)
    data_labels: Optional[dict[str, Any]] = None
    show_in_legend: Optional[bool] = None
    on_click: Optional[ClickHandler] = Field(default=None, exclude=True)

    def click(self, point_name: Optional[str]) -> None:
        """Forward a click on `point_name` to the registered handler."""
        if self.on_click is not None:
            self.on_click(point_name)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": self.type,
            "name": self.name,
            "data": [dict(point) for point in self.data],
        }
        if self.id is not None:
            result["id"] = self.id
        if self.color_by_point:
            result["colorByPoint"] = True
        if self.tooltip:
            result["tooltip"] = dict(self.tooltip)
        if self.data_labels is not None:
            result["dataLabels"] = dict(self.data_labels)
        if self.show_in_legend is not None:
            result["showInLegend"] = self.show_in_legend
        if self.on_click is not None:
            result["events"] = {"click": self.click}
        return result


class ChartOptions(BaseModel):
    """
    Complete options for one chart.

    Attributes:
        series: Series drawn in the chart
        title: Chart title
        subtitle: Chart subtitle
        y_axis_title: Value axis title
        drilldown: Drill-down series keyed by symbol (empty when disabled)
        is_private_mode: Hide value-axis labels
    """

    model_config = ConfigDict(frozen=True)

    series: list[ChartSeries] = Field(default_factory=list)
    title: Optional[str] = None
    subtitle: Optional[str] = None
    y_axis_title: Optional[str] = None
    drilldown: dict[str, Any] = Field(default_factory=dict)
    is_private_mode: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "series": [s.to_dict() for s in self.series],
            "drilldown": self.drilldown,
            "tooltip": {
                "outside": True,
                "useHTML": True,
                "backgroundColor": "#FFF",
                "style": {"color": "#1F2A33"},
            },
            "title": {"text": self.title},
            "subtitle": {"text": self.subtitle, "style": {"color": "#1F2A33"}},
            "xAxis": {
                "type": "category",
                "labels": {
                    "rotation": -45,
                    "style": {"fontSize": "13px", "fontFamily": "Verdana, sans-serif"},
                },
            },
            "yAxis": {
                "labels": {"enabled": not self.is_private_mode},
                "title": {"text": self.y_axis_title},
            },
            "plotOptions": {
                "pie": {
                    "allowPointSelect": True,
                    "cursor": "pointer",
                    "dataLabels": {
                        "enabled": True,
                        "format": "<b>{point.name}</b>: {point.percentage:.1f} %",
                        "style": {"color": "black"},
                    },
                }
            },
            "exporting": {},
        }


class HoldingsCharts(BaseModel):
    """All charts of the holdings view plus the backtest link."""

    model_config = ConfigDict(frozen=True)

    holdings_column: ChartOptions
    holdings_pie: ChartOptions
    currency_composition: ChartOptions
    top_gainers: ChartOptions
    top_losers: ChartOptions
    backtest_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "holdingsColumn": self.holdings_column.to_dict(),
            "holdingsPie": self.holdings_pie.to_dict(),
            "currencyComposition": self.currency_composition.to_dict(),
            "topGainers": self.top_gainers.to_dict(),
            "topLosers": self.top_losers.to_dict(),
            "backtestUrl": self.backtest_url,
        }
