"""Time-series calculations."""

from commodity_dashboard.indicators.transformer import (
    TimeSeriesTransformer,
    transform,
    filter_by_range,
    latest_trends,
)

__all__ = ["TimeSeriesTransformer", "transform", "filter_by_range", "latest_trends"]
