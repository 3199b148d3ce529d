from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from econ_forecast.application.models.forecast_context import (  # noqa: E402
    ForecastContext,
    build_forecast_context,
)
from econ_forecast.domain.entities.health import (  # noqa: E402
    CorpusStats,
    ForecastHealth,
    ResourceCheck,
    ResourceName,
    ServiceStatus,
)
from econ_forecast.domain.entities.indicators import (  # noqa: E402
    IndicatorSet,
    PredictionMethod,
)
from econ_forecast.domain.entities.vocabulary import Vocabulary  # noqa: E402
from econ_forecast.domain.repositories.historical_record_repository import (  # noqa: E402
    IHistoricalRecordRepository,
)

CSV_HEADER = (
    "country,year,gdp_growth,population_growth,exports_growth,imports_growth,"
    "investment_growth,consumption_growth,govt_spend_growth"
)


def make_record(country: str, year: int, gdp_growth: float, base: float = 1.0) -> IndicatorSet:
    return IndicatorSet(
        country=country,
        year=year,
        gdp_growth=gdp_growth,
        population_growth=base * 0.5,
        exports_growth=base * 3.0,
        imports_growth=base * 2.5,
        investment_growth=base * 2.0,
        consumption_growth=base * 1.5,
        govt_spend_growth=base * 1.0,
    )


def make_health(
    model_status: ServiceStatus = ServiceStatus.DEGRADED,
    countries: int = 2,
) -> ForecastHealth:
    corpus_status = ServiceStatus.UP if countries else ServiceStatus.DOWN
    return ForecastHealth(
        checks=(
            ResourceCheck(
                name=ResourceName.CORPUS,
                status=corpus_status,
                message=f"{countries} countries",
                details={"countries": countries},
            ),
            ResourceCheck(
                name=ResourceName.MODEL, status=model_status, message="model"
            ),
        ),
        corpus=CorpusStats(
            records=countries * 3,
            countries=countries,
            first_year=2014 if countries else None,
            last_year=2016 if countries else None,
        ),
        prediction_method=(
            PredictionMethod.MODEL
            if model_status is ServiceStatus.UP
            else PredictionMethod.SIMULATION
        ),
        model_estimator="LinearRegression" if model_status is ServiceStatus.UP else None,
    )


class FakeHealthCheck:
    def __init__(self, health: ForecastHealth):
        self.health = health

    async def evaluate(self) -> ForecastHealth:
        return self.health


class FakeHistoricalRecordRepository(IHistoricalRecordRepository):
    def __init__(self, records: Sequence[IndicatorSet]):
        self.records = list(records)
        self.queries: List[str] = []

    async def find_by_country(self, country: str) -> List[IndicatorSet]:
        self.queries.append(country)
        return [record for record in self.records if record.country == country]

    async def find_all(self) -> List[IndicatorSet]:
        return list(self.records)

    async def list_countries(self) -> List[str]:
        return sorted({record.country for record in self.records})

    def snapshot(self) -> List[IndicatorSet]:
        return list(self.records)


class FakeForecastingModel:
    """Returns a fixed value and records every feature vector it receives."""

    def __init__(self, value: float = 2.5, error: Exception | None = None):
        self.value = value
        self.error = error
        self.calls: List[List[float]] = []

    def predict(self, features: Sequence[float]) -> float:
        self.calls.append(list(features))
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture()
def sample_records() -> List[IndicatorSet]:
    return [
        make_record("Brazil", 2012, 1.92, base=1.0),
        make_record("Brazil", 2013, 3.0, base=1.1),
        make_record("Brazil", 2014, 0.5, base=0.9),
        make_record("Brazil", 2015, -3.55, base=0.4),
        make_record("Brazil", 2016, -3.28, base=0.3),
        make_record("Brazil", 2017, 1.32, base=0.8),
        make_record("Germany", 2014, 2.21, base=1.2),
        make_record("Germany", 2015, 1.49, base=1.1),
        make_record("Germany", 2016, 2.23, base=1.0),
    ]


@pytest.fixture()
def vocabulary(sample_records: List[IndicatorSet]) -> Vocabulary:
    return Vocabulary.from_countries(record.country for record in sample_records)


@pytest.fixture()
def historical_repository(
    sample_records: List[IndicatorSet],
) -> FakeHistoricalRecordRepository:
    return FakeHistoricalRecordRepository(sample_records)


@pytest.fixture()
def forecasting_model() -> FakeForecastingModel:
    return FakeForecastingModel(value=2.5)


@pytest.fixture()
def context_without_model(sample_records: List[IndicatorSet]) -> ForecastContext:
    return build_forecast_context(sample_records)


@pytest.fixture()
def context_with_model(
    sample_records: List[IndicatorSet], forecasting_model: FakeForecastingModel
) -> ForecastContext:
    return build_forecast_context(sample_records, model=forecasting_model)


@pytest.fixture()
def brazil_payload() -> Dict[str, Any]:
    return {
        "country": "Brazil",
        "population_growth": 0.8,
        "exports_growth": 3.5,
        "imports_growth": 4.2,
        "investment_growth": 2.1,
        "consumption_growth": 2.8,
        "govt_spend_growth": 1.5,
    }


@pytest.fixture()
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "corpus.csv"
    rows = [
        CSV_HEADER,
        "Brazil,2014,0.5,0.9,2.1,-1.0,-4.0,2.2,0.8",
        "Brazil,2015,-3.55,0.85,6.8,-14.2,-13.9,-3.2,-1.4",
        "Brazil,2016,-3.28,0.8,0.9,-10.2,-12.1,-3.8,0.2",
        "Germany,2015,1.49,0.9,5.2,5.6,1.7,1.9,2.9",
        "Germany,2016,2.23,0.8,2.3,4.0,3.8,2.1,4.0",
    ]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def record_factory():
    return make_record


@pytest.fixture()
def model_factory():
    return FakeForecastingModel


@pytest.fixture()
def repository_factory():
    return FakeHistoricalRecordRepository


@pytest.fixture()
def health_factory():
    return make_health


@pytest.fixture()
def health_check_factory():
    return FakeHealthCheck
