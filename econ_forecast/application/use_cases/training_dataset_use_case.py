"""
Application Use Case - Training Dataset

Prepares the supervised dataset the forecasting model is trained on:
  - Loads the historical corpus
  - Builds lag-1 rows (features of year Y-1, target of year Y)
  - Splits the rows chronologically at a cut year (no shuffling)
  - Encodes the country through the vocabulary as the first feature
  - Optionally scores the loaded model on the test partition

Fitting the estimator itself happens outside this service.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
import structlog
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from econ_forecast.application.dtos.dataset_dto import (
    DatasetSummaryDTO,
    EvaluationMetricsDTO,
    PartitionSummaryDTO,
)
from econ_forecast.application.models.forecast_context import ForecastContext
from econ_forecast.domain.entities.errors import (
    ModelUnavailableError,
    UnknownCountryError,
)
from econ_forecast.domain.entities.indicators import LAG_FEATURE_NAMES, LaggedRow
from econ_forecast.domain.repositories.historical_record_repository import (
    IHistoricalRecordRepository,
)
from econ_forecast.domain.services.lagged_features import build_lagged_rows
from econ_forecast.domain.services.temporal_splitter import TemporalSplit, split

logger = structlog.get_logger(__name__)

FEATURE_NAMES: Tuple[str, ...] = ("country_code",) + LAG_FEATURE_NAMES


@dataclass(frozen=True)
class TrainingDataset:
    cut_year: int
    x_train: np.ndarray
    y_train: np.ndarray
    x_test: np.ndarray
    y_test: np.ndarray
    partitions: TemporalSplit
    feature_names: Tuple[str, ...] = FEATURE_NAMES


class BuildTrainingDatasetUseCase:
    """Builds leakage-free train/test matrices from the historical corpus."""

    def __init__(
        self,
        historical_repository: IHistoricalRecordRepository,
        context: ForecastContext,
    ):
        self.historical_repository = historical_repository
        self.context = context

    async def execute(self, cut_year: int) -> TrainingDataset:
        records = await self.historical_repository.find_all()
        rows = build_lagged_rows(records)
        partitions = split(rows, cut_year)

        x_train, y_train = self._to_matrix(partitions.train)
        x_test, y_test = self._to_matrix(partitions.test)

        logger.info(
            "dataset.built",
            records=len(records),
            lagged_rows=len(rows),
            cut_year=cut_year,
            train_rows=len(partitions.train),
            test_rows=len(partitions.test),
        )

        return TrainingDataset(
            cut_year=cut_year,
            x_train=x_train,
            y_train=y_train,
            x_test=x_test,
            y_test=y_test,
            partitions=partitions,
        )

    async def summarize(self, cut_year: int) -> DatasetSummaryDTO:
        dataset = await self.execute(cut_year)
        evaluation = None
        if self.context.model_loaded and len(dataset.y_test) > 0:
            evaluation = self._evaluate(dataset)

        return DatasetSummaryDTO(
            cut_year=cut_year,
            feature_names=list(dataset.feature_names),
            train=self._summarize_partition(dataset.partitions.train),
            test=self._summarize_partition(dataset.partitions.test),
            evaluation=evaluation,
        )

    def _to_matrix(self, rows: Sequence[LaggedRow]) -> Tuple[np.ndarray, np.ndarray]:
        width = len(FEATURE_NAMES)
        if not rows:
            return (
                np.empty((0, width), dtype=np.float64),
                np.empty((0,), dtype=np.float64),
            )

        features: List[List[float]] = []
        targets: List[float] = []
        for row in rows:
            code = self.context.vocabulary.code_for(row.country)
            if code is None:
                raise UnknownCountryError(row.country)
            features.append([float(code), *row.features])
            targets.append(row.target)
        return np.asarray(features, dtype=np.float64), np.asarray(targets, dtype=np.float64)

    def _evaluate(self, dataset: TrainingDataset) -> EvaluationMetricsDTO:
        model = self.context.model
        try:
            y_pred = np.asarray(
                [float(model.predict(row.tolist())) for row in dataset.x_test],
                dtype=np.float64,
            )
        except Exception as exc:
            raise ModelUnavailableError(
                "Loaded model failed while scoring the test partition"
            ) from exc

        y_true = dataset.y_test
        mse = float(mean_squared_error(y_true, y_pred))
        mae = float(mean_absolute_error(y_true, y_pred))
        rmse = float(np.sqrt(mse))
        r2 = float(r2_score(y_true, y_pred)) if len(y_true) >= 2 else None
        if r2 is not None and not np.isfinite(r2):
            r2 = None

        logger.info("dataset.evaluated", mae=mae, rmse=rmse, r2=r2)
        return EvaluationMetricsDTO(mae=mae, rmse=rmse, r2=r2)

    @staticmethod
    def _summarize_partition(rows: Sequence[LaggedRow]) -> PartitionSummaryDTO:
        years = [row.year for row in rows]
        return PartitionSummaryDTO(
            rows=len(rows),
            first_year=min(years) if years else None,
            last_year=max(years) if years else None,
            countries=len({row.country for row in rows}),
        )
