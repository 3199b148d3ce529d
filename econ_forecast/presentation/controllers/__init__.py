"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto application use cases and
use-case errors onto HTTP status codes.
"""

from .forecast_controller import router as forecast_router
from .system_controller import router as system_router

__all__ = ["forecast_router", "system_router"]
