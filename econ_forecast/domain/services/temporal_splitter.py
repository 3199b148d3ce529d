"""Domain service splitting lagged rows into train/test sets by a cut year."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from econ_forecast.domain.entities.indicators import LaggedRow


@dataclass(frozen=True)
class TemporalSplit:
    train: Tuple[LaggedRow, ...]
    test: Tuple[LaggedRow, ...]


def split(rows: Iterable[LaggedRow], cut_year: int) -> TemporalSplit:
    """Rows before ``cut_year`` go to train, the rest to test.

    Input order is kept inside each partition; nothing is shuffled.
    """

    train: List[LaggedRow] = []
    test: List[LaggedRow] = []
    for row in rows:
        (train if row.year < cut_year else test).append(row)
    return TemporalSplit(train=tuple(train), test=tuple(test))
