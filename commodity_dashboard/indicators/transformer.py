"""Transform raw BCPI observations into chart-ready series.

Each weekly observation becomes a ProcessedPoint carrying the parsed index
values and a trailing year-over-year change per series. The year-over-year
lookback is positional: the value 52 observations earlier, not the value
from the same calendar week. A gap or duplicate week in the source shifts
which observation is compared.
"""

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime

import pandas as pd

from commodity_dashboard.config import BCPI_SERIES
from commodity_dashboard.models.commodity_data import (
    LatestTrend,
    ProcessedPoint,
    RawObservation,
    Series,
    SeriesSpec,
)


logger = logging.getLogger(__name__)


# One year of weekly observations
LOOKBACK_PERIODS = 52


def parse_value(text: str | None) -> float:
    """Parse numeric text, NaN when missing or not a number."""
    if text is None:
        return math.nan
    try:
        result = float(text)
    except (TypeError, ValueError):
        return math.nan
    # float() accepts "inf" and "nan" spellings
    return result if math.isfinite(result) else math.nan


def parse_date(stamp: str) -> date | None:
    """Parse an ISO date or datetime stamp, None when malformed."""
    try:
        return datetime.fromisoformat(stamp.strip()).date()
    except (AttributeError, ValueError):
        return None


def format_display_date(observed: date) -> str:
    """Format as "Jan 7, 1972"."""
    return f"{observed.strftime('%b')} {observed.day}, {observed.year}"


def calculate_yoy_change(
    values: Sequence[float], index: int, periods: int = LOOKBACK_PERIODS
) -> float | None:
    """
    Percent change against the value `periods` positions earlier.

    Returns None when there is not enough history, when either value is NaN,
    when the prior value is zero, or when the change overflows.
    """
    if index < periods:
        return None

    current = values[index]
    prior = values[index - periods]
    if math.isnan(current) or math.isnan(prior) or prior == 0:
        return None

    change = (current - prior) / prior * 100
    return change if math.isfinite(change) else None


def _as_bound(bound: date | str | None) -> date | None:
    if bound is None or bound == "":
        return None
    if isinstance(bound, datetime):
        return bound.date()
    if isinstance(bound, date):
        return bound
    parsed = parse_date(bound)
    if parsed is None:
        raise ValueError(f"Invalid date bound: {bound!r}")
    return parsed


class TimeSeriesTransformer:
    """Stateless transformer from raw observations to processed points."""

    def __init__(
        self,
        series: dict[Series, SeriesSpec] | None = None,
        lookback: int = LOOKBACK_PERIODS,
    ) -> None:
        self.series = series or BCPI_SERIES
        self.lookback = lookback

    def transform(self, observations: Sequence[RawObservation]) -> list[ProcessedPoint]:
        """
        Normalize observations and derive year-over-year changes.

        Args:
            observations: Weekly observations in ascending date order

        Returns:
            One ProcessedPoint per observation, same order
        """
        columns: dict[Series, list[float]] = {
            s: [parse_value(obs.values.get(spec.code)) for obs in observations]
            for s, spec in self.series.items()
        }

        points = []
        for i, obs in enumerate(observations):
            observed = parse_date(obs.date)
            points.append(
                ProcessedPoint(
                    date=format_display_date(observed) if observed else obs.date,
                    raw_date=obs.date,
                    observed=observed,
                    values={s: col[i] for s, col in columns.items()},
                    yoy={
                        s: calculate_yoy_change(col, i, self.lookback)
                        for s, col in columns.items()
                    },
                )
            )

        unparsed = sum(math.isnan(v) for col in columns.values() for v in col)
        logger.debug(
            f"Transformed {len(points)} observations ({unparsed} unparsed fields)"
        )
        return points

    def filter_by_range(
        self,
        points: Sequence[ProcessedPoint],
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> list[ProcessedPoint]:
        """
        Select points whose date falls within [start, end].

        Both bounds are inclusive and optional. Returns a new list; the input
        is never modified.
        """
        start_date = _as_bound(start)
        end_date = _as_bound(end)

        if start_date is None and end_date is None:
            return list(points)

        return [
            p
            for p in points
            if p.observed is not None
            and (start_date is None or p.observed >= start_date)
            and (end_date is None or p.observed <= end_date)
        ]

    def latest_trends(self, points: Sequence[ProcessedPoint]) -> list[LatestTrend] | None:
        """
        Latest value and YoY change for each charted series.

        Returns None when the view holds less than a year of observations.
        """
        if len(points) < self.lookback:
            return None

        latest = points[-1]
        return [
            LatestTrend(
                series=s,
                name=self.series[s].name,
                color=self.series[s].color,
                value=latest.value(s),
                yoy=latest.yoy_change(s) or 0.0,
            )
            for s in self.series
            if self.series[s].charted
        ]

    def to_frame(self, points: Sequence[ProcessedPoint], yoy: bool = False) -> pd.DataFrame:
        """
        Build a chart-ready DataFrame.

        Returns:
            DataFrame with DatetimeIndex and one column per series key
        """
        columns = [s.value for s in self.series]
        if not points:
            return pd.DataFrame(columns=columns)

        rows = []
        for p in points:
            source = p.yoy if yoy else p.values
            rows.append({s.value: source.get(s) for s in self.series})

        df = pd.DataFrame(rows, columns=columns, dtype=float)
        df.index = pd.to_datetime([p.raw_date for p in points], errors="coerce")
        df.index.name = "date"
        return df


def date_bounds(points: Sequence[ProcessedPoint]) -> tuple[date, date] | None:
    """First and last observed dates, None when no point has a valid date."""
    observed = [p.observed for p in points if p.observed is not None]
    if not observed:
        return None
    return observed[0], observed[-1]


_default = TimeSeriesTransformer()


def transform(observations: Sequence[RawObservation]) -> list[ProcessedPoint]:
    return _default.transform(observations)


def filter_by_range(
    points: Sequence[ProcessedPoint],
    start: date | str | None = None,
    end: date | str | None = None,
) -> list[ProcessedPoint]:
    return _default.filter_by_range(points, start, end)


def latest_trends(points: Sequence[ProcessedPoint]) -> list[LatestTrend] | None:
    return _default.latest_trends(points)

