"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .historical_record_repository import IHistoricalRecordRepository

__all__ = ["IHistoricalRecordRepository"]
