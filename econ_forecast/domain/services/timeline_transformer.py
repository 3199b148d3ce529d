"""
Domain Service - Timeline Transformer

Normalizes historical records and a single forecast into one
chronologically ordered sequence of chart points. Inputs are never
mutated; every function returns a new list.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Protocol, Sequence

from econ_forecast.domain.entities.errors import TimelineError
from econ_forecast.domain.entities.timeline import ChartPoint, PointKind

DEFAULT_HORIZON = 2
# Growth of each synthetic year after the first is the previous one times
# this factor.
DEFAULT_COMPOUNDING_FACTOR = 1.05


class HistoricalRecord(Protocol):
    year: int
    gdp_growth: float


def transform_historical(records: Iterable[HistoricalRecord]) -> List[ChartPoint]:
    """Map historical records to chart points ordered by numeric year."""

    ordered = sorted(records, key=lambda record: int(record.year))
    return [
        ChartPoint(
            year=str(int(record.year)),
            growth=round(float(record.gdp_growth), 2),
            kind=PointKind.HISTORICAL,
        )
        for record in ordered
    ]


def append_forecast(
    points: Sequence[ChartPoint],
    predicted_growth: float,
    horizon: int = DEFAULT_HORIZON,
    compounding_factor: float = DEFAULT_COMPOUNDING_FACTOR,
) -> List[ChartPoint]:
    """Append ``horizon`` prediction points after the last historical year.

    Prediction points already present in ``points`` are replaced, so the
    result always holds a single historical-to-prediction transition.

    Raises:
        TimelineError: If ``horizon`` is below 1 or there is no historical
            point to anchor the forecast on.
    """

    if horizon < 1:
        raise TimelineError("Forecast horizon must be at least 1", {"horizon": horizon})

    historical = [point for point in points if point.kind == PointKind.HISTORICAL]
    if not historical:
        raise TimelineError("Cannot anchor a forecast on an empty history")

    last_year = int(historical[-1].year)
    forecast = [
        ChartPoint(
            year=str(last_year + step),
            growth=round(predicted_growth * compounding_factor ** (step - 1), 2),
            kind=PointKind.PREDICTION,
        )
        for step in range(1, horizon + 1)
    ]
    return historical + forecast


def placeholder_history(
    base_growth: float = 3.0,
    first_year: int = 1973,
    last_year: int = 2024,
) -> List[ChartPoint]:
    """Deterministic stand-in series for when the real history is unavailable.

    A ten-year sine cycle of amplitude 2 around ``base_growth``.
    """

    return [
        ChartPoint(
            year=str(year),
            growth=round(base_growth + math.sin((year - first_year) / 10) * 2, 2),
            kind=PointKind.HISTORICAL,
        )
        for year in range(first_year, last_year + 1)
    ]


def assert_timeline_ordered(points: Sequence[ChartPoint]) -> None:
    """Check years strictly increase and kinds switch at most once.

    Raises:
        TimelineError: On the first violation found.
    """

    for previous, current in zip(points, points[1:]):
        if int(current.year) <= int(previous.year):
            raise TimelineError(
                "Timeline years must be strictly increasing",
                {"previous": previous.year, "current": current.year},
            )
        if (
            previous.kind == PointKind.PREDICTION
            and current.kind == PointKind.HISTORICAL
        ):
            raise TimelineError(
                "Historical point found after a prediction point",
                {"year": current.year},
            )
