"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .forecast_api_gateway import IForecastApiGateway

__all__ = ["IForecastApiGateway"]
