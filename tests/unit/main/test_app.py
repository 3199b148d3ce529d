from __future__ import annotations

import pytest

from econ_forecast.main import app as module_app
from econ_forecast.main.app import create_app


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan(corpus_file, monkeypatch) -> None:
    monkeypatch.setenv("DATA_CORPUS_PATH", str(corpus_file))

    app = create_app()
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container.forecast_context().model_loaded is False

    assert isinstance(module_app.app, type(app))


def test_routes_are_registered(corpus_file, monkeypatch) -> None:
    monkeypatch.setenv("DATA_CORPUS_PATH", str(corpus_file))

    paths = {route.path for route in create_app().routes}

    assert {
        "/countries",
        "/history/{country}",
        "/predict",
        "/predict/analysis",
        "/dataset/summary",
        "/health",
        "/info",
    } <= paths
