"""
Infrastructure Service - Forecasting Model Loader

Loads the trained regressor from a joblib artifact and adapts it to the
``IForecastingModel`` port. Any problem while loading leaves the service
without a model, in which case predictions use the simulation fallback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional, Sequence

import joblib
import numpy as np
import structlog

from econ_forecast.domain.entities.errors import ModelUnavailableError

logger = structlog.get_logger(__name__)


class SklearnForecastingModel:
    """Wraps a fitted scikit-learn style regressor."""

    def __init__(self, estimator: Any):
        self._estimator = estimator
        self.estimator_name = type(estimator).__name__

    def predict(self, features: Sequence[float]) -> float:
        matrix = np.asarray([list(features)], dtype=np.float64)
        try:
            output = np.asarray(self._estimator.predict(matrix), dtype=np.float64)
        except Exception as exc:
            raise ModelUnavailableError(
                f"{self.estimator_name} failed to predict",
                {"features": len(matrix[0])},
            ) from exc

        output = output.reshape(-1)
        if output.shape != (1,):
            raise ModelUnavailableError(
                "Forecasting model returned an unexpected output shape",
                {"shape": list(output.shape)},
            )
        return float(output[0])


def load_forecasting_model(
    model_path: Optional[str],
    loader: Callable[[Path], Any] = joblib.load,
) -> Optional[SklearnForecastingModel]:
    """Load the model artifact, returning None when it is not usable."""

    if not model_path:
        logger.info("model.not_configured")
        return None

    path = Path(model_path)
    if not path.is_file():
        logger.warning("model.artifact_missing", path=str(path))
        return None

    try:
        estimator = loader(path)
    except Exception as exc:
        logger.error("model.load_failed", path=str(path), error=str(exc), exc_info=exc)
        return None

    if not callable(getattr(estimator, "predict", None)):
        logger.error(
            "model.invalid_artifact",
            path=str(path),
            artifact_type=type(estimator).__name__,
        )
        return None

    model = SklearnForecastingModel(estimator)
    logger.info("model.loaded", path=str(path), estimator=model.estimator_name)
    return model
