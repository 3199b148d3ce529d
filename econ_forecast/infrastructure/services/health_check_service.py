"""Infrastructure implementation of the forecasting health check."""

from __future__ import annotations

from typing import Optional

from econ_forecast.application.models.forecast_context import ForecastContext
from econ_forecast.domain.entities.health import (
    CorpusStats,
    ForecastHealth,
    ResourceCheck,
    ResourceName,
    ServiceStatus,
)
from econ_forecast.domain.entities.indicators import PredictionMethod
from econ_forecast.domain.ports.forecasting_model import IForecastHealthCheck


class HealthCheckService(IForecastHealthCheck):
    """Reports the corpus coverage and which estimator answers predictions."""

    def __init__(self, context: ForecastContext) -> None:
        self._context = context

    async def evaluate(self) -> ForecastHealth:
        corpus = self._context.corpus
        estimator = self._estimator_name()
        return ForecastHealth(
            checks=(self._check_corpus(corpus), self._check_model(estimator)),
            corpus=corpus,
            prediction_method=(
                PredictionMethod.MODEL
                if self._context.model_loaded
                else PredictionMethod.SIMULATION
            ),
            model_estimator=estimator,
        )

    def _estimator_name(self) -> Optional[str]:
        model = self._context.model
        if model is None:
            return None
        return getattr(model, "estimator_name", None) or type(model).__name__

    def _check_corpus(self, corpus: CorpusStats) -> ResourceCheck:
        details = {
            "records": corpus.records,
            "countries": corpus.countries,
            "vocabulary_size": len(self._context.vocabulary),
            "first_year": corpus.first_year,
            "last_year": corpus.last_year,
        }
        if details["vocabulary_size"] == 0:
            return ResourceCheck(
                name=ResourceName.CORPUS,
                status=ServiceStatus.DOWN,
                message="No countries loaded, every prediction will be rejected",
                details=details,
            )
        return ResourceCheck(
            name=ResourceName.CORPUS,
            status=ServiceStatus.UP,
            message=(
                f"{corpus.records} records for {corpus.countries} countries "
                f"({corpus.first_year}-{corpus.last_year})"
            ),
            details=details,
        )

    def _check_model(self, estimator: Optional[str]) -> ResourceCheck:
        if estimator is None:
            return ResourceCheck(
                name=ResourceName.MODEL,
                status=ServiceStatus.DEGRADED,
                message="Model not loaded, simulation fallback active",
                details={"horizon": self._context.horizon},
            )
        return ResourceCheck(
            name=ResourceName.MODEL,
            status=ServiceStatus.UP,
            message=f"{estimator} loaded",
            details={"estimator": estimator, "horizon": self._context.horizon},
        )
