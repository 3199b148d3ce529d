from __future__ import annotations

from typing import Any, Dict, List, Tuple

import httpx
import pytest

from econ_forecast.domain.entities.errors import ErrorKind, ForecastServiceError
from econ_forecast.domain.entities.indicators import PredictionMethod
from econ_forecast.domain.entities.timeline import PointKind
from econ_forecast.infrastructure.gateways.forecast_api_gateway import (
    ForecastApiGateway,
)

BASE_URL = "http://forecast"


class _StubAsyncClient:
    """Serves canned responses keyed by (method, path)."""

    def __init__(self, routes: Dict[Tuple[str, str], Any], timeout: float):
        self._routes = routes
        self.timeout = timeout
        self.requests: List[Dict[str, Any]] = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def request(self, method, url, json=None, headers=None):
        path = url[len(BASE_URL) :]
        self.requests.append(
            {"method": method, "path": path, "json": json, "headers": headers}
        )
        outcome = self._routes[(method, path)]
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        request = httpx.Request(method, url)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body, request=request)
        return httpx.Response(status_code, json=body, request=request)


@pytest.fixture()
def install_routes(monkeypatch):
    clients: List[_StubAsyncClient] = []

    def _install(routes: Dict[Tuple[str, str], Any]) -> List[_StubAsyncClient]:
        def _factory(timeout):
            client = _StubAsyncClient(routes, timeout)
            clients.append(client)
            return client

        monkeypatch.setattr("httpx.AsyncClient", _factory)
        return clients

    return _install


HISTORY = [
    {"year": "2015", "growth": -3.55, "kind": "historical"},
    {"year": "2016", "growth": -3.28, "kind": "historical"},
]


@pytest.mark.asyncio
async def test_fetch_countries(install_routes) -> None:
    install_routes({("GET", "/countries"): (200, ["Brazil", "Germany"])})

    gateway = ForecastApiGateway(BASE_URL)

    assert await gateway.fetch_countries() == ["Brazil", "Germany"]


@pytest.mark.asyncio
async def test_requests_send_json_headers_and_timeout(
    install_routes, brazil_payload
) -> None:
    clients = install_routes(
        {("POST", "/predict"): (200, {"predicted_growth": 1.77, "method": "model"})}
    )

    gateway = ForecastApiGateway(BASE_URL + "/", timeout=30.0)
    result = await gateway.submit_prediction(brazil_payload)

    assert result.predicted_growth == 1.77
    assert result.method is PredictionMethod.MODEL
    (client,) = clients
    assert client.timeout == 30.0
    sent = client.requests[0]
    assert sent["headers"]["Content-Type"] == "application/json"
    assert sent["json"] == brazil_payload


@pytest.mark.asyncio
async def test_fetch_history_quotes_country(install_routes) -> None:
    clients = install_routes({("GET", "/history/United%20States"): (200, HISTORY)})

    points = await ForecastApiGateway(BASE_URL).fetch_history("United States")

    assert [point.year for point in points] == ["2015", "2016"]
    assert clients[0].requests[0]["path"] == "/history/United%20States"


@pytest.mark.asyncio
async def test_timeout_is_classified_as_retryable(install_routes) -> None:
    install_routes({("GET", "/countries"): httpx.ReadTimeout("slow")})

    with pytest.raises(ForecastServiceError) as exc_info:
        await ForecastApiGateway(BASE_URL).fetch_countries()

    assert exc_info.value.error.kind is ErrorKind.TIMEOUT
    assert exc_info.value.error.retryable is True


@pytest.mark.asyncio
async def test_server_error_is_classified(install_routes) -> None:
    install_routes({("GET", "/countries"): (503, {"detail": "down"})})

    with pytest.raises(ForecastServiceError) as exc_info:
        await ForecastApiGateway(BASE_URL).fetch_countries()

    assert exc_info.value.error.kind is ErrorKind.SERVER_ERROR


@pytest.mark.asyncio
async def test_validation_envelope_is_preserved(install_routes, brazil_payload) -> None:
    envelope = {
        "kind": "Validation",
        "detail": "UnknownCountry",
        "message": "Unknown country 'Atlantis'",
        "fields": ["country"],
        "retryable": False,
    }
    install_routes({("POST", "/predict"): (422, envelope)})

    with pytest.raises(ForecastServiceError) as exc_info:
        await ForecastApiGateway(BASE_URL).submit_prediction(brazil_payload)

    error = exc_info.value.error
    assert error.kind is ErrorKind.VALIDATION
    assert error.detail == "UnknownCountry"
    assert error.fields == ("country",)
    assert error.retryable is False


@pytest.mark.asyncio
async def test_malformed_body_is_unknown(install_routes) -> None:
    install_routes({("GET", "/countries"): (200, {"countries": []})})

    with pytest.raises(ForecastServiceError) as exc_info:
        await ForecastApiGateway(BASE_URL).fetch_countries()

    assert exc_info.value.error.kind is ErrorKind.UNKNOWN


@pytest.mark.asyncio
async def test_history_failure_uses_placeholder(install_routes) -> None:
    install_routes({("GET", "/history/Brazil"): httpx.ConnectError("refused")})

    points, error = await ForecastApiGateway(BASE_URL).fetch_history_or_placeholder(
        "Brazil"
    )

    assert error is not None and error.kind is ErrorKind.NETWORK
    assert points[0].year == "1973"
    assert len(points) == 52


@pytest.mark.asyncio
async def test_timeline_appends_forecast_to_history(
    install_routes, brazil_payload
) -> None:
    install_routes(
        {
            ("POST", "/predict"): (200, {"predicted_growth": 2.0, "method": "model"}),
            ("GET", "/history/Brazil"): (200, HISTORY),
        }
    )

    prediction, timeline = await ForecastApiGateway(BASE_URL).fetch_timeline(
        "Brazil", brazil_payload
    )

    assert prediction.predicted_growth == 2.0
    assert [point.year for point in timeline] == ["2015", "2016", "2017", "2018"]
    assert [point.growth for point in timeline[-2:]] == [2.0, 2.1]
    assert timeline[-1].kind is PointKind.PREDICTION


@pytest.mark.asyncio
async def test_timeline_with_empty_history(install_routes, brazil_payload) -> None:
    install_routes(
        {
            ("POST", "/predict"): (200, {"predicted_growth": 2.0, "method": "model"}),
            ("GET", "/history/Brazil"): (200, []),
        }
    )

    _, timeline = await ForecastApiGateway(BASE_URL).fetch_timeline(
        "Brazil", brazil_payload
    )

    assert timeline == []


@pytest.mark.asyncio
async def test_timeline_never_fabricates_a_prediction(
    install_routes, brazil_payload
) -> None:
    install_routes(
        {
            ("POST", "/predict"): (500, "internal"),
            ("GET", "/history/Brazil"): (200, HISTORY),
        }
    )

    with pytest.raises(ForecastServiceError) as exc_info:
        await ForecastApiGateway(BASE_URL).fetch_timeline("Brazil", brazil_payload)

    assert exc_info.value.error.kind is ErrorKind.SERVER_ERROR
