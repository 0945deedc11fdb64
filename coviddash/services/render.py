import html
from collections.abc import Sequence
from typing import TextIO

import plotly.graph_objects as go

from coviddash.schemas.chart import ChartDescription

_PLOT_CONFIG = {"displayModeBar": True, "displaylogo": False}


def _title_text(chart: ChartDescription) -> str:
    if chart.subtitle:
        return f"{chart.title}<br><sup>{chart.subtitle}</sup>"
    return chart.title


def _line_figure(chart: ChartDescription) -> go.Figure:
    figure = go.Figure()
    for series in chart.series:
        figure.add_trace(
            go.Scatter(
                x=chart.x_labels,
                y=series.values,
                mode="lines",
                name=series.name,
                line_shape="spline",
            )
        )
        if series.values:
            average = sum(series.values) / len(series.values)
            figure.add_hline(
                y=average,
                line_dash="dot",
                line_width=1,
                annotation_text=f"{series.name}: Avg",
                annotation_position="top left",
            )
    figure.update_layout(xaxis_title="Date", yaxis_title="Count")
    return figure


def _scatter_figure(chart: ChartDescription) -> go.Figure:
    figure = go.Figure()
    for series in chart.series:
        figure.add_trace(
            go.Scatter(
                x=chart.x_labels,
                y=series.values,
                mode="markers",
                name=series.name,
                marker={"size": 12},
            )
        )
    figure.update_layout(xaxis_title="Country", xaxis_type="category")
    return figure


def _pie_figure(chart: ChartDescription) -> go.Figure:
    figure = go.Figure()
    # Inner rings sit inside the hole of the outer ones.
    count = len(chart.rings)
    for index, ring in enumerate(chart.rings):
        inset = 0.2 * (count - 1 - index)
        figure.add_trace(
            go.Pie(
                labels=[item.label for item in ring.slices],
                values=[item.value for item in ring.slices],
                name=ring.name,
                hole=0.0 if index == 0 else 0.6,
                sort=False,
                direction="clockwise",
                textinfo="label+value",
                domain={"x": [inset, 1 - inset], "y": [inset, 1 - inset]},
                customdata=[item.description or item.label for item in ring.slices],
                hovertemplate=(
                    f"{ring.name}<br>%{{customdata}} (%{{label}}): %{{value}}<extra></extra>"
                ),
            )
        )
    return figure


_BUILDERS = {
    "line": _line_figure,
    "scatter": _scatter_figure,
    "pie": _pie_figure,
}


class ChartRenderer:
    """@brief Rendering sink turning chart descriptions into an HTML page."""

    @staticmethod
    def to_figure(chart: ChartDescription) -> go.Figure:
        """@brief Convert a ChartDescription into a plotly figure.

        @param chart Description assembled by the chart builders.
        @return Plotly figure styled with the `plotly_white` template.
        """
        figure = _BUILDERS[chart.kind](chart)
        figure.update_layout(title=_title_text(chart), template="plotly_white")
        return figure

    def render(
        self,
        charts: Sequence[ChartDescription],
        stream: TextIO,
        title: str = "COVID-19 dashboard",
        notice: str | None = None,
    ) -> None:
        """@brief Write a full HTML document containing every chart.

        @param charts Charts to render, in display order. May be empty.
        @param stream Text stream receiving the document.
        @param title Page title.
        @param notice Optional message shown above the charts.
        @return None.
        """
        stream.write("<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n")
        stream.write(f"<title>{html.escape(title)}</title>\n</head>\n<body>\n")
        if notice:
            stream.write(f"<p>{html.escape(notice)}</p>\n")
        for index, chart in enumerate(charts):
            stream.write(
                self.to_figure(chart).to_html(
                    full_html=False,
                    include_plotlyjs="cdn" if index == 0 else False,
                    config=_PLOT_CONFIG,
                )
            )
            stream.write("\n")
        stream.write("</body>\n</html>\n")
