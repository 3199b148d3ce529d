"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of data persistence.
"""

from .csv_historical_record_repository import CsvHistoricalRecordRepository

__all__ = ["CsvHistoricalRecordRepository"]
