"""
Domain Entities - Economic Indicators

Value objects describing observed indicator growth rates for a country,
the scenarios submitted for scoring and the rows used to train the
forecasting model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

COUNTRY_FIELD = "country"

# Order matters: it is the order used for coercion, range checks and for
# assembling the model feature vector.
INDICATOR_FIELDS: Tuple[str, ...] = (
    "population_growth",
    "exports_growth",
    "imports_growth",
    "investment_growth",
    "consumption_growth",
    "govt_spend_growth",
)

REQUIRED_FIELDS: Tuple[str, ...] = (COUNTRY_FIELD,) + INDICATOR_FIELDS

LAG_FEATURE_NAMES: Tuple[str, ...] = tuple(f"{name}_lag1" for name in INDICATOR_FIELDS)

MIN_RATE = -100.0
MAX_RATE = 100.0


class PredictionMethod(str, Enum):
    """Estimator that produced a prediction."""

    MODEL = "model"
    SIMULATION = "simulation"


@dataclass(frozen=True, slots=True)
class IndicatorSet:
    """Observed rates for one country-year of the historical corpus."""

    country: str
    year: int
    gdp_growth: float
    population_growth: float
    exports_growth: float
    imports_growth: float
    investment_growth: float
    consumption_growth: float
    govt_spend_growth: float

    def indicators(self) -> Tuple[float, ...]:
        return tuple(float(getattr(self, name)) for name in INDICATOR_FIELDS)


@dataclass(frozen=True, slots=True)
class ValidatedInput:
    """A prediction request that passed every validation rule."""

    country: str
    population_growth: float
    exports_growth: float
    imports_growth: float
    investment_growth: float
    consumption_growth: float
    govt_spend_growth: float

    def indicators(self) -> Tuple[float, ...]:
        return tuple(float(getattr(self, name)) for name in INDICATOR_FIELDS)


@dataclass(frozen=True, slots=True)
class PredictionResult:
    """Outcome of scoring a scenario."""

    predicted_growth: float
    method: PredictionMethod


@dataclass(frozen=True, slots=True)
class LaggedRow:
    """Training row pairing year-1 indicators with the year's GDP growth."""

    country: str
    year: int
    feature_year: int
    features: Tuple[float, ...]
    target: float
