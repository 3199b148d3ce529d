"""
Infrastructure Repository - CSV Historical Records

Loads the historical indicator corpus from a CSV file once, when the
repository is constructed, and serves it from memory afterwards.
Column headers are matched case-insensitively and the long names used by
the original training notebook (``Population_Growth_Rate`` and so on)
are accepted as aliases.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd
import structlog

from econ_forecast.domain.entities.errors import HistoricalDataError
from econ_forecast.domain.entities.indicators import INDICATOR_FIELDS, IndicatorSet
from econ_forecast.domain.repositories.historical_record_repository import (
    IHistoricalRecordRepository,
)

logger = structlog.get_logger(__name__)

COLUMNS = ("country", "year", "gdp_growth") + INDICATOR_FIELDS

COLUMN_ALIASES = {
    "gdp_growth_rate": "gdp_growth",
    "population_growth_rate": "population_growth",
    "exports_growth_rate": "exports_growth",
    "imports_growth_rate": "imports_growth",
    "investment_growth_rate": "investment_growth",
    "consumption_growth_rate": "consumption_growth",
    "govt_spend_growth_rate": "govt_spend_growth",
}


def _normalize_column(name: str) -> str:
    key = str(name).strip().lower().replace(" ", "_")
    return COLUMN_ALIASES.get(key, key)


class CsvHistoricalRecordRepository(IHistoricalRecordRepository):
    """Historical records read from a CSV corpus."""

    def __init__(self, corpus_path: str):
        self.corpus_path = Path(corpus_path)
        self._records = self._load()
        self._by_country: Dict[str, List[IndicatorSet]] = {}
        for record in self._records:
            self._by_country.setdefault(record.country, []).append(record)

    async def find_by_country(self, country: str) -> List[IndicatorSet]:
        return list(self._by_country.get(country, []))

    async def find_all(self) -> List[IndicatorSet]:
        return list(self._records)

    async def list_countries(self) -> List[str]:
        return sorted(self._by_country)

    def snapshot(self) -> List[IndicatorSet]:
        """Synchronous copy of the corpus, used once at startup."""
        return list(self._records)

    def _load(self) -> List[IndicatorSet]:
        try:
            df = pd.read_csv(self.corpus_path)
        except FileNotFoundError as exc:
            raise HistoricalDataError(
                f"Historical corpus not found: {self.corpus_path}",
                {"path": str(self.corpus_path)},
            ) from exc
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise HistoricalDataError(
                f"Historical corpus could not be parsed: {exc}",
                {"path": str(self.corpus_path)},
            ) from exc

        df = df.rename(columns=_normalize_column)
        missing = [column for column in COLUMNS if column not in df.columns]
        if missing:
            raise HistoricalDataError(
                "Historical corpus is missing columns: " + ", ".join(missing),
                {"path": str(self.corpus_path), "missing": missing},
            )

        df = df[list(COLUMNS)].copy()
        df["country"] = df["country"].astype("string").str.strip()
        numeric = [column for column in COLUMNS if column != "country"]
        df[numeric] = df[numeric].apply(pd.to_numeric, errors="coerce")

        blank_country = (df["country"] == "").fillna(True).astype(bool)
        incomplete = df.isna().any(axis=1) | blank_country
        if incomplete.any():
            logger.warning(
                "historical_corpus.incomplete_rows_dropped",
                dropped=int(incomplete.sum()),
                total=len(df),
            )
            df = df[~incomplete]

        df["year"] = df["year"].astype(int)
        df = df.sort_values(["country", "year"], kind="stable")

        records = [
            IndicatorSet(
                country=str(row.country),
                year=int(row.year),
                gdp_growth=float(row.gdp_growth),
                population_growth=float(row.population_growth),
                exports_growth=float(row.exports_growth),
                imports_growth=float(row.imports_growth),
                investment_growth=float(row.investment_growth),
                consumption_growth=float(row.consumption_growth),
                govt_spend_growth=float(row.govt_spend_growth),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info(
            "historical_corpus.loaded",
            path=str(self.corpus_path),
            records=len(records),
            countries=df["country"].nunique(),
        )
        return records
