"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the corpus file,
the model artifact and the remote forecasting service.
"""

from econ_forecast.infrastructure import gateways, repositories, services

__all__ = ["gateways", "repositories", "services"]
