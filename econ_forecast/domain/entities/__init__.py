"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    ClassifiedError,
    DomainError,
    DuplicateRecordError,
    ErrorKind,
    ForecastServiceError,
    HistoricalDataError,
    ModelUnavailableError,
    TimelineError,
    UnknownCountryError,
    ValidationErrorKind,
    ValidationFailure,
)
from .health import (
    ApplicationInfo,
    CorpusStats,
    ForecastHealth,
    ResourceCheck,
    ResourceName,
    ServiceStatus,
)
from .indicators import (
    INDICATOR_FIELDS,
    REQUIRED_FIELDS,
    IndicatorSet,
    LaggedRow,
    PredictionMethod,
    PredictionResult,
    ValidatedInput,
)
from .timeline import ChartPoint, PointKind
from .vocabulary import Vocabulary

__all__ = [
    "INDICATOR_FIELDS",
    "REQUIRED_FIELDS",
    "IndicatorSet",
    "ValidatedInput",
    "PredictionResult",
    "PredictionMethod",
    "LaggedRow",
    "ChartPoint",
    "PointKind",
    "Vocabulary",
    "ForecastHealth",
    "ResourceCheck",
    "ResourceName",
    "CorpusStats",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "UnknownCountryError",
    "DuplicateRecordError",
    "TimelineError",
    "ModelUnavailableError",
    "HistoricalDataError",
    "ValidationErrorKind",
    "ValidationFailure",
    "ErrorKind",
    "ClassifiedError",
    "ForecastServiceError",
]
