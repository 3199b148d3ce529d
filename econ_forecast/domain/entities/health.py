"""
Health domain entities.

The service is usable as long as the historical corpus yields at least one
country: predictions for unknown countries are rejected, so an empty
vocabulary rejects every request. The trained model only decides whether
answers come from the estimator or from the weighted simulation, so its
absence degrades the service without taking it down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from econ_forecast.domain.entities.indicators import IndicatorSet, PredictionMethod


class ServiceStatus(str, Enum):
    """Availability of a forecasting resource or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"


_SEVERITY = {ServiceStatus.UP: 0, ServiceStatus.DEGRADED: 1, ServiceStatus.DOWN: 2}


class ResourceName(str, Enum):
    CORPUS = "corpus"
    MODEL = "model"


@dataclass(frozen=True)
class CorpusStats:
    """Size and coverage of the historical corpus loaded at startup."""

    records: int = 0
    countries: int = 0
    first_year: Optional[int] = None
    last_year: Optional[int] = None

    @classmethod
    def from_records(cls, records: Iterable[IndicatorSet]) -> "CorpusStats":
        records = list(records)
        years = [record.year for record in records]
        return cls(
            records=len(records),
            countries=len({record.country for record in records}),
            first_year=min(years) if years else None,
            last_year=max(years) if years else None,
        )


@dataclass(frozen=True)
class ResourceCheck:
    """Outcome of checking one forecasting resource."""

    name: ResourceName
    status: ServiceStatus
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def overall_status(checks: Iterable[ResourceCheck]) -> ServiceStatus:
    """The worst status among the checks; UP when there is none."""
    worst = ServiceStatus.UP
    for check in checks:
        if _SEVERITY[check.status] > _SEVERITY[worst]:
            worst = check.status
    return worst


@dataclass(frozen=True)
class ForecastHealth:
    """Whether predictions can be served, and how they are produced."""

    checks: Tuple[ResourceCheck, ...]
    corpus: CorpusStats
    prediction_method: PredictionMethod
    model_estimator: Optional[str] = None

    @property
    def status(self) -> ServiceStatus:
        return overall_status(self.checks)

    @property
    def can_predict(self) -> bool:
        return self.status is not ServiceStatus.DOWN

    def check(self, name: ResourceName) -> Optional[ResourceCheck]:
        return next((item for item in self.checks if item.name is name), None)


@dataclass(frozen=True)
class ApplicationInfo:
    """Operational metadata surfaced by the /info endpoint."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    health: ForecastHealth
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> ServiceStatus:
        return self.health.status
