"""Forecast API gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import quote

import httpx

from econ_forecast.application.dtos.history_dto import ChartPointDTO
from econ_forecast.application.dtos.prediction_dto import PredictionResponseDTO
from econ_forecast.domain.entities.errors import ClassifiedError, ForecastServiceError
from econ_forecast.domain.entities.indicators import PredictionResult
from econ_forecast.domain.entities.timeline import ChartPoint
from econ_forecast.domain.gateways.forecast_api_gateway import IForecastApiGateway
from econ_forecast.domain.services.timeline_transformer import (
    DEFAULT_COMPOUNDING_FACTOR,
    DEFAULT_HORIZON,
    append_forecast,
    placeholder_history,
)
from econ_forecast.infrastructure.services.error_classifier import classify
from econ_forecast.shared import get_logger

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class ForecastApiGateway(IForecastApiGateway):
    """HTTP client for a deployed forecasting service."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        horizon: int = DEFAULT_HORIZON,
        compounding_factor: float = DEFAULT_COMPOUNDING_FACTOR,
    ):
        """
        Initialize the Forecast API gateway.

        Args:
            base_url: Base URL of the forecasting service
            timeout: Deadline in seconds for every request
            horizon: Number of forecast years appended to a timeline
            compounding_factor: Growth factor between forecast years
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.horizon = horizon
        self.compounding_factor = compounding_factor

    async def fetch_countries(self) -> List[str]:
        body = await self._request("GET", "/countries")
        if not isinstance(body, list):
            raise ForecastServiceError(classify(ValueError("Expected a list of countries")))
        return [str(country) for country in body]

    async def fetch_history(self, country: str) -> List[ChartPoint]:
        body = await self._request("GET", f"/history/{quote(country, safe='')}")
        try:
            if not isinstance(body, list):
                raise ValueError("Expected a list of chart points")
            return [ChartPointDTO.model_validate(item).to_domain() for item in body]
        except ValueError as exc:
            raise ForecastServiceError(classify(exc)) from exc

    async def submit_prediction(self, payload: Mapping[str, Any]) -> PredictionResult:
        body = await self._request("POST", "/predict", json=dict(payload))
        try:
            dto = PredictionResponseDTO.model_validate(body)
        except ValueError as exc:
            raise ForecastServiceError(classify(exc)) from exc
        return PredictionResult(predicted_growth=dto.predicted_growth, method=dto.method)

    async def fetch_history_or_placeholder(
        self, country: str
    ) -> Tuple[List[ChartPoint], Optional[ClassifiedError]]:
        try:
            return await self.fetch_history(country), None
        except ForecastServiceError as exc:
            logger.warning(
                "forecast_api.history.placeholder",
                country=country,
                kind=exc.error.kind.value,
            )
            return placeholder_history(), exc.error

    async def fetch_timeline(
        self, country: str, payload: Mapping[str, Any]
    ) -> Tuple[PredictionResult, List[ChartPoint]]:
        # A failed prediction propagates; only the history may be substituted.
        prediction = await self.submit_prediction(payload)
        history, _ = await self.fetch_history_or_placeholder(country)
        if not history:
            return prediction, []
        timeline = append_forecast(
            history,
            prediction.predicted_growth,
            horizon=self.horizon,
            compounding_factor=self.compounding_factor,
        )
        return prediction, timeline

    async def _request(
        self, method: str, path: str, json: Optional[Mapping[str, Any]] = None
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("forecast_api.request", method=method, url=url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method, url, json=json, headers=JSON_HEADERS
                )
                response.raise_for_status()
                return response.json()

        except (httpx.HTTPError, ValueError) as exc:
            error = classify(exc)
            logger.warning(
                "forecast_api.request_failed",
                method=method,
                url=url,
                kind=error.kind.value,
                retryable=error.retryable,
            )
            raise ForecastServiceError(error) from exc
