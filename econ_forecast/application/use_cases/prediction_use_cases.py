"""
Application Use Case - GDP Growth Prediction

Scores a scenario of indicator growth rates for a country. The flow is:
  * Validation of the raw payload against the country vocabulary
  * Feature assembly (country code followed by the six indicators)
  * Estimation through an ordered list of estimators, the trained model
    first and the weighted simulation as fallback
  * Optional scenario analysis and timeline merge for the dashboard

Validation failures are returned, not raised, so callers branch on the
result type instead of catching exceptions.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import structlog

from econ_forecast.application.dtos.history_dto import to_chart_point_dtos
from econ_forecast.application.dtos.prediction_dto import (
    ContributionDTO,
    PredictionResponseDTO,
    ScenarioAnalysisResponseDTO,
)
from econ_forecast.application.models.forecast_context import ForecastContext
from econ_forecast.domain.entities.errors import (
    ModelUnavailableError,
    UnknownCountryError,
    ValidationFailure,
)
from econ_forecast.domain.entities.indicators import PredictionResult, ValidatedInput
from econ_forecast.domain.repositories.historical_record_repository import (
    IHistoricalRecordRepository,
)
from econ_forecast.domain.services.estimators import (
    GrowthEstimator,
    ModelEstimator,
    SimulationEstimator,
)
from econ_forecast.domain.services.input_validator import validate
from econ_forecast.domain.services.scenario_analysis import (
    confidence_score,
    contribution_breakdown,
    recent_trend,
)
from econ_forecast.domain.services.timeline_transformer import (
    append_forecast,
    transform_historical,
)

logger = structlog.get_logger(__name__)


class PredictionService:
    """Evaluates validated scenarios against the forecasting capability.

    This is the only component that degrades instead of failing: when an
    estimator raises, the next one in the list is tried.
    """

    def __init__(
        self,
        context: ForecastContext,
        estimators: Optional[Sequence[GrowthEstimator]] = None,
    ):
        self._context = context
        if estimators is None:
            estimators = (ModelEstimator(context.model), SimulationEstimator())
        self._estimators = tuple(estimators)

    def predict(self, scenario: ValidatedInput) -> PredictionResult:
        country_code = self._context.vocabulary.code_for(scenario.country)
        if country_code is None:
            raise UnknownCountryError(scenario.country)

        indicators = scenario.indicators()
        for estimator in self._estimators:
            try:
                value = estimator.estimate(country_code, indicators)
            except Exception as exc:
                logger.warning(
                    "prediction.estimator_failed",
                    method=estimator.method.value,
                    country=scenario.country,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                continue
            return PredictionResult(
                predicted_growth=round(value, 2), method=estimator.method
            )

        raise ModelUnavailableError(
            "No estimator produced a prediction", {"country": scenario.country}
        )


class PredictGrowthUseCase:
    """Validates a raw payload and scores it."""

    def __init__(self, context: ForecastContext, prediction_service: PredictionService):
        self.context = context
        self.prediction_service = prediction_service

    async def execute(
        self, payload: Any
    ) -> Union[PredictionResponseDTO, ValidationFailure]:
        outcome = validate(payload, self.context.vocabulary)
        if isinstance(outcome, ValidationFailure):
            logger.info(
                "prediction.rejected",
                kind=outcome.kind.value,
                fields=list(outcome.fields),
            )
            return outcome

        result = self.prediction_service.predict(outcome)
        logger.info(
            "prediction.completed",
            country=outcome.country,
            predicted_growth=result.predicted_growth,
            method=result.method.value,
        )
        return PredictionResponseDTO.from_domain(result)


class AnalyzeScenarioUseCase:
    """Scores a scenario and returns its breakdown and merged timeline."""

    def __init__(
        self,
        context: ForecastContext,
        prediction_service: PredictionService,
        historical_repository: IHistoricalRecordRepository,
    ):
        self.context = context
        self.prediction_service = prediction_service
        self.historical_repository = historical_repository

    async def execute(
        self, payload: Any
    ) -> Union[ScenarioAnalysisResponseDTO, ValidationFailure]:
        outcome = validate(payload, self.context.vocabulary)
        if isinstance(outcome, ValidationFailure):
            return outcome

        result = self.prediction_service.predict(outcome)
        records = await self.historical_repository.find_by_country(outcome.country)
        history = transform_historical(records)
        timeline = (
            append_forecast(
                history,
                result.predicted_growth,
                horizon=self.context.horizon,
                compounding_factor=self.context.compounding_factor,
            )
            if history
            else []
        )

        return ScenarioAnalysisResponseDTO(
            predicted_growth=result.predicted_growth,
            method=result.method,
            confidence_score=confidence_score(outcome),
            contributions=[
                ContributionDTO.from_domain(item)
                for item in contribution_breakdown(outcome)
            ],
            recent_trend=recent_trend(history),
            timeline=to_chart_point_dtos(timeline),
        )
