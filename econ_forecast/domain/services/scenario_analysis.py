"""Scenario analysis helpers shown next to a prediction."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import List, Optional, Sequence

from econ_forecast.domain.entities.indicators import ValidatedInput
from econ_forecast.domain.entities.timeline import ChartPoint, PointKind
from econ_forecast.domain.services.estimators import SIMULATION_WEIGHTS, simulation_terms

CONFIDENCE_FLOOR = 85.0
CONFIDENCE_CEILING = 98.0


@dataclass(frozen=True, slots=True)
class Contribution:
    name: str
    value: float
    percentage: float


def contribution_breakdown(scenario: ValidatedInput) -> List[Contribution]:
    """Split the simulated growth into its weighted terms."""
    return [
        Contribution(
            name=name,
            value=round(value, 2),
            percentage=round(SIMULATION_WEIGHTS[name] * 100, 2),
        )
        for name, value in simulation_terms(scenario.indicators())
    ]


def confidence_score(scenario: ValidatedInput) -> float:
    """Score how consistent the scenario inputs are with each other.

    Diverging exports/imports and investment/consumption lower the score,
    which is then clamped to [CONFIDENCE_FLOOR, CONFIDENCE_CEILING].
    """
    consistency = (
        100.0
        - abs(scenario.exports_growth - scenario.imports_growth) * 2.0
        - abs(scenario.investment_growth - scenario.consumption_growth) * 1.5
    )
    return round(max(CONFIDENCE_FLOOR, min(CONFIDENCE_CEILING, consistency)), 2)


def recent_trend(points: Sequence[ChartPoint]) -> Optional[float]:
    """Average growth of the recent history window, before the last two years."""
    historical = [point for point in points if point.kind == PointKind.HISTORICAL]
    window = historical[-6:-2]
    if not window:
        return None
    return round(mean(point.growth for point in window), 2)
