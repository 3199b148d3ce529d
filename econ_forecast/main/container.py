"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from econ_forecast.application.models import SystemInfo
from econ_forecast.application.models.forecast_context import build_forecast_context
from econ_forecast.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from econ_forecast.application.use_cases.history_use_cases import (
    GetCountriesUseCase,
    GetHistoryUseCase,
)
from econ_forecast.application.use_cases.prediction_use_cases import (
    AnalyzeScenarioUseCase,
    PredictGrowthUseCase,
    PredictionService,
)
from econ_forecast.application.use_cases.training_dataset_use_case import (
    BuildTrainingDatasetUseCase,
)
from econ_forecast.infrastructure.gateways.forecast_api_gateway import (
    ForecastApiGateway,
)
from econ_forecast.infrastructure.repositories.csv_historical_record_repository import (
    CsvHistoricalRecordRepository,
)
from econ_forecast.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from econ_forecast.infrastructure.services.model_loader import load_forecasting_model
from econ_forecast.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    historical_repository = providers.Singleton(
        CsvHistoricalRecordRepository,
        corpus_path=config.data.corpus_path,
    )

    forecasting_model = providers.Singleton(
        load_forecasting_model,
        model_path=config.data.model_path,
    )

    # Read-only state shared by every request
    forecast_context = providers.Singleton(
        build_forecast_context,
        records=providers.Callable(lambda repo: repo.snapshot(), historical_repository),
        model=forecasting_model,
        horizon=config.forecast.horizon,
        compounding_factor=config.forecast.compounding_factor,
    )

    # Gateways
    forecast_api_gateway = providers.Singleton(
        ForecastApiGateway,
        base_url=config.forecast.api_base_url,
        timeout=config.forecast.request_timeout,
        horizon=config.forecast.horizon,
        compounding_factor=config.forecast.compounding_factor,
    )

    # Application (use cases)
    prediction_service = providers.Singleton(
        PredictionService,
        context=forecast_context,
    )

    predict_growth_use_case = providers.Factory(
        PredictGrowthUseCase,
        context=forecast_context,
        prediction_service=prediction_service,
    )

    analyze_scenario_use_case = providers.Factory(
        AnalyzeScenarioUseCase,
        context=forecast_context,
        prediction_service=prediction_service,
        historical_repository=historical_repository,
    )

    get_history_use_case = providers.Factory(
        GetHistoryUseCase,
        historical_repository=historical_repository,
    )

    get_countries_use_case = providers.Factory(
        GetCountriesUseCase,
        context=forecast_context,
    )

    build_training_dataset_use_case = providers.Factory(
        BuildTrainingDatasetUseCase,
        historical_repository=historical_repository,
        context=forecast_context,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        context=forecast_context,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
        corpus_path=config.data.corpus_path,
        model_path=config.data.model_path,
        api_base_url=config.forecast.api_base_url,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for the forecasting resources.

    The corpus, the vocabulary and the model are loaded once here so that
    a broken corpus fails the startup instead of the first request.
    """
    container = get_container()

    try:
        context = container.forecast_context()
        logger.info(
            "container.resources.initialized",
            countries=len(context.vocabulary),
            model_loaded=context.model_loaded,
        )
        yield container

    finally:
        logger.info("container.resources.shutdown")
