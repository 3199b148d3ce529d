"""Application models shared by use cases."""

from .forecast_context import ForecastContext, build_forecast_context
from .system_info import SystemInfo

__all__ = ["ForecastContext", "build_forecast_context", "SystemInfo"]
