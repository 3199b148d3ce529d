"""Infrastructure services package."""

from .error_classifier import classify
from .health_check_service import HealthCheckService
from .model_loader import SklearnForecastingModel, load_forecasting_model

__all__ = [
    "classify",
    "HealthCheckService",
    "SklearnForecastingModel",
    "load_forecasting_model",
]
