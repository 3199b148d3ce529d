"""
Domain Service - Lagged Feature Builder

Builds training rows where the features of year Y are the indicators
observed in year Y-1 and the target is the GDP growth of year Y. A
feature vector therefore always predates its target.

The earliest record of each country produces no row since there is no
previous year to take features from. Rows whose previous year is missing
are dropped as well; gaps are never interpolated.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from econ_forecast.domain.entities.errors import DuplicateRecordError
from econ_forecast.domain.entities.indicators import IndicatorSet, LaggedRow


def _group_by_country(
    records: Iterable[IndicatorSet],
) -> Dict[str, Dict[int, IndicatorSet]]:
    groups: Dict[str, Dict[int, IndicatorSet]] = {}
    for record in records:
        by_year = groups.setdefault(record.country, {})
        if record.year in by_year:
            raise DuplicateRecordError(record.country, record.year)
        by_year[record.year] = record
    return groups


def build_lagged_rows(records: Iterable[IndicatorSet]) -> List[LaggedRow]:
    """Convert per-country records into lag-1 training rows.

    Countries keep their first-appearance order; rows of a country are
    emitted by ascending year.

    Raises:
        DuplicateRecordError: If a country has two records for one year.
    """

    rows: List[LaggedRow] = []
    for country, by_year in _group_by_country(records).items():
        for year in sorted(by_year):
            previous = by_year.get(year - 1)
            if previous is None:
                continue
            rows.append(
                LaggedRow(
                    country=country,
                    year=year,
                    feature_year=previous.year,
                    features=previous.indicators(),
                    target=float(by_year[year].gdp_growth),
                )
            )
    return rows
