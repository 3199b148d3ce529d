"""
Domain Errors

This module defines the domain exceptions together with the value types
used to report failures to callers: validation failures returned by the
input validator and the classified errors produced by the error classifier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnknownCountryError(DomainError):
    """Raised when a country has no code in the vocabulary."""

    def __init__(self, country: str, details: Optional[Dict[str, Any]] = None):
        self.country = country
        super().__init__(f"Country '{country}' is not in the vocabulary", details)


class DuplicateRecordError(DomainError):
    """Raised when the corpus holds two records for the same country-year."""

    def __init__(self, country: str, year: int):
        super().__init__(
            f"Duplicate record for {country} in {year}",
            {"country": country, "year": year},
        )


class TimelineError(DomainError):
    """Raised when a timeline cannot be built or breaks its ordering rules."""


class ModelUnavailableError(DomainError):
    """Raised by an estimator that cannot produce a usable value."""


class HistoricalDataError(DomainError):
    """Raised when the historical corpus cannot be loaded or parsed."""


class ValidationErrorKind(str, Enum):
    """Reasons a prediction request can be rejected."""

    MISSING_FIELDS = "MissingFields"
    INVALID_TYPE = "InvalidType"
    OUT_OF_RANGE = "OutOfRange"
    EMPTY_COUNTRY = "EmptyCountry"
    UNKNOWN_COUNTRY = "UnknownCountry"


@dataclass(frozen=True)
class ValidationFailure:
    """Structured result returned by the validator instead of raising."""

    kind: ValidationErrorKind
    message: str
    fields: Tuple[str, ...] = ()
    context: Dict[str, Any] = field(default_factory=dict)


class ErrorKind(str, Enum):
    """Fixed failure taxonomy surfaced to callers."""

    NETWORK = "Network"
    TIMEOUT = "Timeout"
    CLIENT_ERROR = "ClientError"
    SERVER_ERROR = "ServerError"
    VALIDATION = "Validation"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ClassifiedError:
    """Terminal description of a failure with retry guidance."""

    kind: ErrorKind
    message: str
    retryable: bool
    fields: Optional[Tuple[str, ...]] = None
    detail: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)


class ForecastServiceError(DomainError):
    """Raised by gateways once a remote failure has been classified."""

    def __init__(self, error: ClassifiedError):
        self.error = error
        super().__init__(error.message, {"kind": error.kind.value})
