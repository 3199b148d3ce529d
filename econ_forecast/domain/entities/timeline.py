"""Domain entities for the render-ready growth timeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PointKind(str, Enum):
    HISTORICAL = "historical"
    PREDICTION = "prediction"


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """One (year, growth, kind) entry of the unified timeline."""

    year: str
    growth: float
    kind: PointKind
