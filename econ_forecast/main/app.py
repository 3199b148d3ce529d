"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from econ_forecast.main.config import get_settings
from econ_forecast.main.container import app_lifespan, init_container
from econ_forecast.presentation.controllers import forecast_router, system_router
from econ_forecast.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Basic logging first so that settings loading can already log
configure_logging()

update_logging_from_settings(get_settings())

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    Records the startup time reported by ``/info`` and delegates resource
    loading to the container's ``app_lifespan``.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.starting")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.stopped")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        debug=settings.ge.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # The dashboard is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(forecast_router)
    app.include_router(system_router)

    return app


app = create_app()
