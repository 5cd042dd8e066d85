"""Plotly chart helpers shared by the Streamlit app and the HTML export."""

from collections.abc import Iterable, Sequence

import plotly.graph_objects as go

from commodity_dashboard.config import BCPI_SERIES, CHARTED_SERIES
from commodity_dashboard.indicators.transformer import TimeSeriesTransformer
from commodity_dashboard.models.commodity_data import LatestTrend, ProcessedPoint, Series


# Fixed YoY axis range, wider moves are clipped
YOY_RANGE = [-50, 50]

UP_COLOR = "#16a34a"
DOWN_COLOR = "#dc2626"


def build_chart(
    points: Sequence[ProcessedPoint],
    series: Iterable[Series] | None = None,
    show_yoy: bool = False,
    transformer: TimeSeriesTransformer | None = None,
) -> go.Figure:
    """
    Line chart of the selected series.

    Args:
        points: Filtered view to plot
        series: Series to draw, defaults to all charted series
        show_yoy: Plot YoY % change instead of index levels
    """
    transformer = transformer or TimeSeriesTransformer()
    selected = set(series if series is not None else CHARTED_SERIES)
    df = transformer.to_frame(points, yoy=show_yoy)

    fig = go.Figure()
    suffix = "%" if show_yoy else ""

    for s in CHARTED_SERIES:
        if s not in selected:
            continue
        spec = BCPI_SERIES[s]
        name = f"{spec.name} YoY %" if show_yoy else spec.name
        fig.add_trace(go.Scatter(
            x=df.index, y=df[s.value],
            mode="lines", line=dict(color=spec.color, width=1.5),
            name=name,
            connectgaps=True,
            hovertemplate=f"{spec.name}: %{{y:.2f}}{suffix}<extra></extra>",
        ))

    fig.add_hline(y=0, line_dash="dash", line_color="#666666", line_width=1)

    fig.update_layout(
        height=600, margin=dict(l=0, r=20, t=30, b=0),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis=dict(showgrid=True, tickangle=-45, tickfont=dict(size=12)),
        hovermode="x unified",
    )

    if show_yoy:
        fig.update_yaxes(title_text="% Change YoY", range=YOY_RANGE, tickfont=dict(size=12))
    else:
        fig.update_yaxes(title_text="", autorange=True, tickfont=dict(size=12))

    return fig


def format_trend(trend: LatestTrend) -> tuple[str, str, str]:
    """Format a trend as (value text, change text, change color)."""
    arrow, color = ("↑", UP_COLOR) if trend.yoy > 0 else ("↓", DOWN_COLOR)
    return f"{trend.value:.2f}", f"{arrow} {abs(trend.yoy):.1f}% YoY", color
