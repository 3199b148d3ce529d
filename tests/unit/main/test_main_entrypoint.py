from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setenv("GE_HOST", "127.0.0.1")
    monkeypatch.setenv("GE_PORT", "8123")
    monkeypatch.setattr("uvicorn.run", fake_run)

    runpy.run_module("econ_forecast.main.__main__", run_name="__main__")

    assert calls["app"] == "econ_forecast.main.app:app"
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 8123
    assert calls["reload"] is False
