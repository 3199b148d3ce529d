"""Use cases for the historical series and the country listing."""

from typing import List

import structlog

from econ_forecast.application.dtos.history_dto import (
    ChartPointDTO,
    to_chart_point_dtos,
)
from econ_forecast.application.models.forecast_context import ForecastContext
from econ_forecast.domain.repositories.historical_record_repository import (
    IHistoricalRecordRepository,
)
from econ_forecast.domain.services.timeline_transformer import transform_historical

logger = structlog.get_logger(__name__)


class GetHistoryUseCase:
    """Returns the render-ready historical GDP growth series of a country."""

    def __init__(self, historical_repository: IHistoricalRecordRepository) -> None:
        self._historical_repository = historical_repository

    async def execute(self, country: str) -> List[ChartPointDTO]:
        records = await self._historical_repository.find_by_country(country.strip())
        points = transform_historical(records)
        logger.debug("history.loaded", country=country, points=len(points))
        return to_chart_point_dtos(points)


class GetCountriesUseCase:
    """Returns the countries the model knows about."""

    def __init__(self, context: ForecastContext) -> None:
        self._context = context

    async def execute(self) -> List[str]:
        return self._context.vocabulary.countries()
