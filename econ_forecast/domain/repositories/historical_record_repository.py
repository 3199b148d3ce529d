"""
Historical Record Repository Interface

Abstracts access to the historical corpus of country-year indicator
records. The corpus doubles as the training set of the forecasting model
and as the source of the country vocabulary.
"""

from abc import ABC, abstractmethod
from typing import List

from econ_forecast.domain.entities.indicators import IndicatorSet


class IHistoricalRecordRepository(ABC):
    """Interface for historical record repository implementations."""

    @abstractmethod
    async def find_by_country(self, country: str) -> List[IndicatorSet]:
        """
        Find every record of a country.

        Args:
            country: Exact country name as stored in the corpus

        Returns:
            The country's records, empty if the country is unknown
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[IndicatorSet]:
        """Return every record of the corpus."""
        pass

    @abstractmethod
    async def list_countries(self) -> List[str]:
        """Return the distinct country names of the corpus, sorted."""
        pass
