"""
Presentation Layer - Forecast Controller

Endpoints consumed by the forecasting dashboard: the country list, the
historical series of a country and the scoring of indicator scenarios.
"""

from typing import Any, List, Optional, Union

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from econ_forecast.application.dtos.dataset_dto import DatasetSummaryDTO
from econ_forecast.application.dtos.history_dto import ChartPointDTO
from econ_forecast.application.dtos.prediction_dto import (
    PredictionResponseDTO,
    ScenarioAnalysisResponseDTO,
    ValidationErrorResponseDTO,
)
from econ_forecast.application.use_cases.history_use_cases import (
    GetCountriesUseCase,
    GetHistoryUseCase,
)
from econ_forecast.application.use_cases.prediction_use_cases import (
    AnalyzeScenarioUseCase,
    PredictGrowthUseCase,
)
from econ_forecast.application.use_cases.training_dataset_use_case import (
    BuildTrainingDatasetUseCase,
)
from econ_forecast.domain.entities.errors import (
    DomainError,
    ModelUnavailableError,
    UnknownCountryError,
    ValidationErrorKind,
    ValidationFailure,
)
from econ_forecast.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Forecast"])

SCENARIO_EXAMPLE = {
    "country": "Brazil",
    "population_growth": 0.8,
    "exports_growth": 3.5,
    "imports_growth": 4.2,
    "investment_growth": 2.1,
    "consumption_growth": 2.8,
    "govt_spend_growth": 1.5,
}


def _validation_response(failure: ValidationFailure) -> JSONResponse:
    body = ValidationErrorResponseDTO.from_failure(failure)
    return JSONResponse(
        status_code=422,
        content=body.model_dump(),
    )


def _unknown_country_response(exc: UnknownCountryError) -> JSONResponse:
    return _validation_response(
        ValidationFailure(
            kind=ValidationErrorKind.UNKNOWN_COUNTRY,
            message=exc.message,
            fields=("country",),
            context={"country": exc.country},
        )
    )


@router.get(
    "/countries",
    response_model=List[str],
    summary="List the countries known by the model",
)
@inject
async def list_countries(
    countries_use_case: GetCountriesUseCase = Depends(
        Provide[AppContainer.get_countries_use_case]
    ),
) -> List[str]:
    return await countries_use_case.execute()


@router.get(
    "/history/{country}",
    response_model=List[ChartPointDTO],
    summary="Historical GDP growth series of a country",
    description="""
    Returns the chronologically ordered historical points of a country,
    ready to be rendered. An unknown country yields an empty list.
    """,
)
@inject
async def get_history(
    country: str,
    history_use_case: GetHistoryUseCase = Depends(
        Provide[AppContainer.get_history_use_case]
    ),
) -> List[ChartPointDTO]:
    try:
        return await history_use_case.execute(country)
    except Exception as exc:
        logger.error(
            "history.unexpected_error", country=country, error=str(exc), exc_info=exc
        )
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "/predict",
    response_model=PredictionResponseDTO,
    summary="Predict the GDP growth of an indicator scenario",
    responses={422: {"model": ValidationErrorResponseDTO}},
)
@inject
async def predict(
    payload: Any = Body(..., examples=[SCENARIO_EXAMPLE]),
    predict_use_case: PredictGrowthUseCase = Depends(
        Provide[AppContainer.predict_growth_use_case]
    ),
) -> Union[PredictionResponseDTO, JSONResponse]:
    try:
        outcome = await predict_use_case.execute(payload)
    except UnknownCountryError as exc:
        return _unknown_country_response(exc)
    except ModelUnavailableError as exc:
        logger.error("prediction.unavailable", error=exc.message, details=exc.details)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Forecasting is temporarily unavailable",
        )
    except Exception as exc:
        logger.error("prediction.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")

    if isinstance(outcome, ValidationFailure):
        return _validation_response(outcome)
    return outcome


@router.post(
    "/predict/analysis",
    response_model=ScenarioAnalysisResponseDTO,
    summary="Predict a scenario and explain it",
    description="""
    Scores the scenario like `/predict` and adds the weighted contribution
    of every indicator, a confidence score, the recent historical trend and
    the history of the country extended with the forecast.
    """,
    responses={422: {"model": ValidationErrorResponseDTO}},
)
@inject
async def analyze(
    payload: Any = Body(..., examples=[SCENARIO_EXAMPLE]),
    analysis_use_case: AnalyzeScenarioUseCase = Depends(
        Provide[AppContainer.analyze_scenario_use_case]
    ),
) -> Union[ScenarioAnalysisResponseDTO, JSONResponse]:
    try:
        outcome = await analysis_use_case.execute(payload)
    except UnknownCountryError as exc:
        return _unknown_country_response(exc)
    except ModelUnavailableError as exc:
        logger.error("analysis.unavailable", error=exc.message, details=exc.details)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Forecasting is temporarily unavailable",
        )
    except DomainError as exc:
        logger.error("analysis.failed", error=exc.message, details=exc.details)
        raise HTTPException(status_code=500, detail="Internal server error")
    except Exception as exc:
        logger.error("analysis.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")

    if isinstance(outcome, ValidationFailure):
        return _validation_response(outcome)
    return outcome


@router.get(
    "/dataset/summary",
    response_model=DatasetSummaryDTO,
    summary="Summarize the lagged train/test partitions",
)
@inject
async def dataset_summary(
    cut_year: Optional[int] = Query(
        default=None, description="First year of the test partition"
    ),
    default_cut_year: int = Depends(Provide[AppContainer.config.data.cut_year]),
    dataset_use_case: BuildTrainingDatasetUseCase = Depends(
        Provide[AppContainer.build_training_dataset_use_case]
    ),
) -> DatasetSummaryDTO:
    effective_cut_year = cut_year if cut_year is not None else default_cut_year
    try:
        return await dataset_use_case.summarize(effective_cut_year)
    except ModelUnavailableError as exc:
        logger.error("dataset.model_unavailable", error=exc.message)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message
        )
    except DomainError as exc:
        logger.error("dataset.failed", error=exc.message, details=exc.details)
        raise HTTPException(status_code=409, detail=exc.message)
    except Exception as exc:
        logger.error("dataset.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
