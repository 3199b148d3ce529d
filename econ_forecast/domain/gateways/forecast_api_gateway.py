"""
Domain Gateway - Forecast API

Interface of the client used by dashboards and other consumers to reach a
deployed forecasting service over HTTP.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Tuple

from econ_forecast.domain.entities.errors import ClassifiedError
from econ_forecast.domain.entities.indicators import PredictionResult
from econ_forecast.domain.entities.timeline import ChartPoint


class IForecastApiGateway(ABC):
    """Interface for the forecasting service client."""

    @abstractmethod
    async def fetch_countries(self) -> List[str]:
        """
        Fetch the countries known by the forecasting model.

        Raises:
            ForecastServiceError: Carrying the classified failure
        """
        pass

    @abstractmethod
    async def fetch_history(self, country: str) -> List[ChartPoint]:
        """
        Fetch the historical growth series of a country.

        Args:
            country: Country name as listed by ``fetch_countries``

        Returns:
            Chart points ordered by year, empty for an unknown country

        Raises:
            ForecastServiceError: Carrying the classified failure
        """
        pass

    @abstractmethod
    async def submit_prediction(self, payload: Mapping[str, Any]) -> PredictionResult:
        """
        Submit a scenario for scoring.

        Args:
            payload: Body with the seven prediction request fields

        Raises:
            ForecastServiceError: Carrying the classified failure
        """
        pass

    @abstractmethod
    async def fetch_history_or_placeholder(
        self, country: str
    ) -> Tuple[List[ChartPoint], Optional[ClassifiedError]]:
        """
        Fetch the history, substituting a placeholder series on failure.

        Returns:
            The points and, when the placeholder was used, the failure
        """
        pass

    @abstractmethod
    async def fetch_timeline(
        self, country: str, payload: Mapping[str, Any]
    ) -> Tuple[PredictionResult, List[ChartPoint]]:
        """
        Score a scenario and merge its forecast into the country's history.

        Raises:
            ForecastServiceError: Carrying the classified failure
        """
        pass
