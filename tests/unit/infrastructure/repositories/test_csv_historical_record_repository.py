from __future__ import annotations

import pytest

from econ_forecast.domain.entities.errors import HistoricalDataError
from econ_forecast.infrastructure.repositories.csv_historical_record_repository import (
    CsvHistoricalRecordRepository,
)


@pytest.mark.asyncio
async def test_records_are_loaded_per_country(corpus_file) -> None:
    repository = CsvHistoricalRecordRepository(str(corpus_file))

    brazil = await repository.find_by_country("Brazil")

    assert [record.year for record in brazil] == [2014, 2015, 2016]
    assert brazil[1].gdp_growth == -3.55
    assert brazil[1].imports_growth == -14.2
    assert await repository.list_countries() == ["Brazil", "Germany"]
    assert len(await repository.find_all()) == 5


@pytest.mark.asyncio
async def test_unknown_country_has_no_records(corpus_file) -> None:
    repository = CsvHistoricalRecordRepository(str(corpus_file))

    assert await repository.find_by_country("Atlantis") == []


@pytest.mark.asyncio
async def test_long_column_names_are_accepted(tmp_path) -> None:
    path = tmp_path / "aliases.csv"
    path.write_text(
        "Country,Year,GDP_Growth_Rate,Population_Growth_Rate,Exports_Growth_Rate,"
        "Imports_Growth_Rate,Investment_Growth_Rate,Consumption_Growth_Rate,"
        "Govt_Spend_Growth_Rate\n"
        "Japan,2019,-0.4,-0.2,-1.5,1.0,0.5,-0.6,1.9\n",
        encoding="utf-8",
    )

    repository = CsvHistoricalRecordRepository(str(path))

    (record,) = await repository.find_by_country("Japan")
    assert record.year == 2019
    assert record.govt_spend_growth == 1.9


@pytest.mark.asyncio
async def test_incomplete_rows_are_dropped(tmp_path) -> None:
    path = tmp_path / "incomplete.csv"
    path.write_text(
        "country,year,gdp_growth,population_growth,exports_growth,imports_growth,"
        "investment_growth,consumption_growth,govt_spend_growth\n"
        "India,2018,6.5,1.0,12.0,8.6,9.9,7.4,7.6\n"
        "India,2019,,1.0,-3.4,-0.8,5.4,5.2,3.9\n"
        ",2019,1.0,1.0,1.0,1.0,1.0,1.0,1.0\n"
        "India,2020,-5.8,0.9,n/a,-13.8,-10.4,-5.2,3.6\n",
        encoding="utf-8",
    )

    repository = CsvHistoricalRecordRepository(str(path))

    records = await repository.find_all()
    assert [(record.country, record.year) for record in records] == [("India", 2018)]


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(HistoricalDataError):
        CsvHistoricalRecordRepository(str(tmp_path / "absent.csv"))


def test_missing_columns_are_reported(tmp_path) -> None:
    path = tmp_path / "partial.csv"
    path.write_text("country,year,gdp_growth\nBrazil,2015,-3.55\n", encoding="utf-8")

    with pytest.raises(HistoricalDataError) as exc_info:
        CsvHistoricalRecordRepository(str(path))

    assert "population_growth" in exc_info.value.details["missing"]


def test_snapshot_is_a_copy(corpus_file) -> None:
    repository = CsvHistoricalRecordRepository(str(corpus_file))

    snapshot = repository.snapshot()
    snapshot.clear()

    assert len(repository.snapshot()) == 5
