"""Data models."""

from commodity_dashboard.models.commodity_data import (
    Series,
    SeriesSpec,
    RawObservation,
    ProcessedPoint,
    LatestTrend,
)

__all__ = ["Series", "SeriesSpec", "RawObservation", "ProcessedPoint", "LatestTrend"]
