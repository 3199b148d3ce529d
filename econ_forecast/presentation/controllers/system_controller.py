"""
Presentation Layer - System Controller

Operational endpoints: whether predictions can currently be served (and by
which estimator), and the build metadata of the running service.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from econ_forecast.application.dtos.health_dto import (
    ApplicationInfoDTO,
    ForecastHealthDTO,
)
from econ_forecast.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from econ_forecast.domain.entities.health import ServiceStatus
from econ_forecast.main.container import AppContainer
from econ_forecast.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=ForecastHealthDTO,
    summary="Forecasting readiness",
    description="""
    Reports the loaded corpus, the size of the country vocabulary and the
    estimator answering predictions. A missing model only degrades the
    service (the simulation answers instead). An empty corpus rejects every
    prediction, so the endpoint answers 503.
    """,
    responses={503: {"model": ForecastHealthDTO}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide[AppContainer.get_health_status_use_case]
    ),
) -> ForecastHealthDTO:
    try:
        forecast_health = await get_health_status_use_case.execute()
    except Exception as exc:
        logger.error("health.evaluation_failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to evaluate the forecasting resources",
        ) from exc

    if forecast_health.status is ServiceStatus.DOWN:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning(
            "health.cannot_predict",
            records=forecast_health.corpus.records,
            countries=forecast_health.corpus.countries,
        )
    else:
        logger.debug(
            "health.evaluated",
            status=forecast_health.status.value,
            prediction_method=forecast_health.prediction_method.value,
            countries=forecast_health.corpus.countries,
        )
    return forecast_health


@router.get("/info", response_model=ApplicationInfoDTO)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide[AppContainer.get_application_info_use_case]
    ),
) -> ApplicationInfoDTO:
    """Build metadata, uptime and forecasting readiness of the service."""
    started_at = getattr(request.app.state, "started_at", None)
    try:
        return await get_application_info_use_case.execute(started_at)
    except Exception as exc:
        logger.error("info.fetch_failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve application info",
        ) from exc
