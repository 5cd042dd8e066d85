"""Data models for commodity price index data."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Series(Enum):
    """Tracked BCPI component indices."""
    TOTAL = "BCPI"
    NON_ENERGY = "BCNE"  # Auxiliary, not charted
    ENERGY = "Energy"
    METALS = "Metals"
    AGRICULTURE = "Agriculture"
    FORESTRY = "Forestry"
    FISH = "Fish"


@dataclass(frozen=True)
class SeriesSpec:
    """Lookup entry for a series: external code and presentation."""

    code: str  # Valet series code, e.g. "W.ENER"
    name: str
    color: str
    charted: bool = True


@dataclass(frozen=True)
class RawObservation:
    """Single weekly observation as supplied in the source file."""

    date: str
    values: dict[str, str] = field(default_factory=dict)  # code -> numeric text


@dataclass(frozen=True)
class ProcessedPoint:
    """
    Normalized observation with derived year-over-year changes.

    The freeze is shallow: `values` and `yoy` are plain dicts so points stay
    picklable for st.cache_data. Treat them as read-only.
    """

    date: str  # Display date, e.g. "Jan 7, 1972"
    raw_date: str
    observed: date | None
    values: dict[Series, float]  # NaN when unavailable
    yoy: dict[Series, float | None]  # Percent, None when undefined

    def value(self, series: Series) -> float:
        return self.values.get(series, float("nan"))

    def yoy_change(self, series: Series) -> float | None:
        return self.yoy.get(series)


@dataclass
class LatestTrend:
    """Latest value and YoY change for one series."""

    series: Series
    name: str
    color: str
    value: float
    yoy: float  # 0.0 when undefined, display default only
