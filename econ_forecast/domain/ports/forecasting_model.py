"""Domain ports for the trained GDP growth model and its health."""

from __future__ import annotations

from typing import Protocol, Sequence

from econ_forecast.domain.entities.health import ForecastHealth


class IForecastingModel(Protocol):
    """Opaque forecasting capability.

    ``features`` is the country code followed by the six indicator growth
    rates, in the order of ``INDICATOR_FIELDS``.
    """

    def predict(self, features: Sequence[float]) -> float:
        """Return the predicted GDP growth rate.

        Raises:
            ModelUnavailableError: When no usable prediction can be made.
        """
        ...


class IForecastHealthCheck(Protocol):
    """Inspects the corpus and the model loaded for forecasting."""

    async def evaluate(self) -> ForecastHealth:
        ...
