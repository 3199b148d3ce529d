"""
Forecast Context - Application Layer

Read-only state shared by every request: the country vocabulary, the
coverage of the corpus it was built from and the trained model (absent
when no artifact could be loaded). The context is
built exactly once at startup through ``build_forecast_context`` and is
never modified afterwards, so it can be shared across concurrent requests
without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from econ_forecast.domain.entities.health import CorpusStats
from econ_forecast.domain.entities.indicators import IndicatorSet
from econ_forecast.domain.entities.vocabulary import Vocabulary
from econ_forecast.domain.ports.forecasting_model import IForecastingModel
from econ_forecast.domain.services.timeline_transformer import (
    DEFAULT_COMPOUNDING_FACTOR,
    DEFAULT_HORIZON,
)
from econ_forecast.shared import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ForecastContext:
    vocabulary: Vocabulary
    model: Optional[IForecastingModel] = None
    horizon: int = DEFAULT_HORIZON
    compounding_factor: float = DEFAULT_COMPOUNDING_FACTOR
    corpus: CorpusStats = field(default_factory=CorpusStats)

    @property
    def model_loaded(self) -> bool:
        return self.model is not None


def build_forecast_context(
    records: Iterable[IndicatorSet],
    model: Optional[IForecastingModel] = None,
    horizon: int = DEFAULT_HORIZON,
    compounding_factor: float = DEFAULT_COMPOUNDING_FACTOR,
) -> ForecastContext:
    """Build the process-wide context from the training corpus."""

    records = list(records)
    vocabulary = Vocabulary.from_countries(record.country for record in records)
    context = ForecastContext(
        vocabulary=vocabulary,
        corpus=CorpusStats.from_records(records),
        model=model,
        horizon=int(horizon),
        compounding_factor=float(compounding_factor),
    )
    logger.info(
        "forecast_context.built",
        records=context.corpus.records,
        countries=len(vocabulary),
        model_loaded=context.model_loaded,
        horizon=context.horizon,
        compounding_factor=context.compounding_factor,
    )
    return context
