"""Domain ports package."""

from .forecasting_model import IForecastHealthCheck, IForecastingModel

__all__ = ["IForecastingModel", "IForecastHealthCheck"]
