"""Streamlit dashboard for the Bank of Canada Commodity Price Index.

Single page:
- Date range, YoY toggle and per-series toggles
- Line chart of index levels or YoY % change
- Latest values & trends panel
"""

import logging
from datetime import date
from html import escape

import streamlit as st

from commodity_dashboard.config import BCPI_SERIES, CHARTED_SERIES, Settings
from commodity_dashboard.data.loader import load_observations
from commodity_dashboard.indicators.transformer import TimeSeriesTransformer, date_bounds
from commodity_dashboard.models.commodity_data import ProcessedPoint, Series
from commodity_dashboard.ui.charts import build_chart, format_trend


logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False)
def load_points(path: str) -> list[ProcessedPoint]:
    """Load the static file and transform it once per session."""
    return TimeSeriesTransformer().transform(load_observations(path))


def _series_key(series: Series) -> str:
    return f"show_{series.value}"


def init_state(bounds: tuple[date, date]) -> None:
    """Seed control state on first run."""
    st.session_state.setdefault("start_date", bounds[0])
    st.session_state.setdefault("end_date", bounds[1])
    st.session_state.setdefault("show_yoy", False)
    for s in CHARTED_SERIES:
        st.session_state.setdefault(_series_key(s), True)


def reset_filters(bounds: tuple[date, date]) -> None:
    """Restore full date range and all series."""
    st.session_state["start_date"] = bounds[0]
    st.session_state["end_date"] = bounds[1]
    for s in CHARTED_SERIES:
        st.session_state[_series_key(s)] = True


# =============================================================================
# CONTROLS
# =============================================================================

def render_controls(bounds: tuple[date, date]) -> tuple[date, date, bool, list[Series]]:
    """Render filter controls and return the current selection."""
    col_start, col_end, col_yoy, col_reset = st.columns([1, 1, 1, 1])
    with col_start:
        start = st.date_input(
            "Start Date", key="start_date", min_value=bounds[0], max_value=bounds[1]
        )
    with col_end:
        end = st.date_input(
            "End Date", key="end_date", min_value=bounds[0], max_value=bounds[1]
        )
    with col_yoy:
        show_yoy = st.checkbox("Show Year-over-Year Changes", key="show_yoy")
    with col_reset:
        st.button("Reset Filters", on_click=reset_filters, args=(bounds,))

    selected = []
    cols = st.columns(len(CHARTED_SERIES))
    for col, s in zip(cols, CHARTED_SERIES):
        with col:
            if st.checkbox(BCPI_SERIES[s].name, key=_series_key(s)):
                selected.append(s)

    return start, end, show_yoy, selected


# =============================================================================
# PANELS
# =============================================================================

def render_trends_panel(transformer: TimeSeriesTransformer, points: list[ProcessedPoint]) -> None:
    """Render latest values and YoY changes for the filtered view."""
    trends = transformer.latest_trends(points)
    if trends is None:
        return

    st.subheader("Latest Values & Trends")
    for trend in trends:
        value_text, change_text, change_color = format_trend(trend)
        st.markdown(
            f"""<div style="display: flex; justify-content: space-between; padding: 0.4rem 0; border-bottom: 1px solid #e5e7eb;">
                <span style="color: {trend.color};">{escape(trend.name)}:</span>
                <div style="text-align: right;">
                    <div>{value_text}</div>
                    <div style="color: {change_color}; font-size: 0.85rem;">{change_text}</div>
                </div>
            </div>""",
            unsafe_allow_html=True,
        )


# =============================================================================
# MAIN APP
# =============================================================================

def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Bank of Canada Commodity Price Index",
        layout="wide",
    )
    st.title("Bank of Canada Commodity Price Index")

    settings = Settings()
    transformer = TimeSeriesTransformer()

    with st.spinner("Loading..."):
        try:
            points = load_points(str(settings.data_path))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading data: {e}")
            st.error("Failed to load data")
            return

    bounds = date_bounds(points)
    if bounds is None:
        st.error("Failed to load data")
        return

    init_state(bounds)
    start, end, show_yoy, selected = render_controls(bounds)

    filtered = transformer.filter_by_range(points, start, end)

    fig = build_chart(filtered, selected, show_yoy, transformer)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    render_trends_panel(transformer, filtered)


if __name__ == "__main__":
    main()
