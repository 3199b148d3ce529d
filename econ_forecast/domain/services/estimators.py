"""
Domain Service - Growth Estimators

Estimators are tried in order by the prediction service; the first one
that returns a value decides the prediction and its method tag. The
trained model comes first and the weighted simulation closes the list as
a deterministic fallback that cannot fail.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional, Protocol, Sequence, Tuple

from econ_forecast.domain.entities.errors import ModelUnavailableError
from econ_forecast.domain.entities.indicators import PredictionMethod
from econ_forecast.domain.ports.forecasting_model import IForecastingModel

# Fixed weights of the fallback simulation. trade_balance applies to
# exports minus imports; there is no intercept.
SIMULATION_WEIGHTS: Mapping[str, float] = {
    "population": 0.15,
    "exports": 0.25,
    "trade_balance": 0.20,
    "investment": 0.20,
    "consumption": 0.15,
    "govt_spend": 0.05,
}


def simulation_terms(indicators: Sequence[float]) -> Tuple[Tuple[str, float], ...]:
    """Return each weighted term of the simulation, keyed by weight name."""
    population, exports, imports, investment, consumption, govt_spend = indicators
    w = SIMULATION_WEIGHTS
    return (
        ("population", population * w["population"]),
        ("exports", exports * w["exports"]),
        ("trade_balance", (exports - imports) * w["trade_balance"]),
        ("investment", investment * w["investment"]),
        ("consumption", consumption * w["consumption"]),
        ("govt_spend", govt_spend * w["govt_spend"]),
    )


def simulate_growth(indicators: Sequence[float]) -> float:
    return sum(value for _, value in simulation_terms(indicators))


class GrowthEstimator(Protocol):
    method: PredictionMethod

    def estimate(self, country_code: int, indicators: Sequence[float]) -> float: ...


class ModelEstimator:
    """Delegates to the trained model when one is loaded."""

    method = PredictionMethod.MODEL

    def __init__(self, model: Optional[IForecastingModel]):
        self._model = model

    def estimate(self, country_code: int, indicators: Sequence[float]) -> float:
        if self._model is None:
            raise ModelUnavailableError("No forecasting model is loaded")
        value = float(self._model.predict([float(country_code), *indicators]))
        if not math.isfinite(value):
            raise ModelUnavailableError(
                "Forecasting model returned a non-finite value", {"value": value}
            )
        return value


class SimulationEstimator:
    method = PredictionMethod.SIMULATION

    def estimate(self, country_code: int, indicators: Sequence[float]) -> float:
        return simulate_growth(indicators)
