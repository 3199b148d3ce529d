"""DTOs for the forecasting health and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from econ_forecast.domain.entities.health import (
    ApplicationInfo,
    CorpusStats,
    ForecastHealth,
    ResourceCheck,
    ResourceName,
    ServiceStatus,
)
from econ_forecast.domain.entities.indicators import PredictionMethod


class ResourceCheckDTO(BaseModel):
    """Serializable outcome of a corpus or model check."""

    name: ResourceName
    status: ServiceStatus
    message: str
    checked_at: datetime
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, check: ResourceCheck) -> "ResourceCheckDTO":
        return cls(
            name=check.name,
            status=check.status,
            message=check.message,
            checked_at=check.checked_at,
            details=check.details,
        )


class CorpusStatsDTO(BaseModel):
    records: int = Field(ge=0, description="Historical records loaded")
    countries: int = Field(ge=0, description="Countries in the vocabulary")
    first_year: Optional[int] = None
    last_year: Optional[int] = None

    @classmethod
    def from_domain(cls, corpus: CorpusStats) -> "CorpusStatsDTO":
        return cls(
            records=corpus.records,
            countries=corpus.countries,
            first_year=corpus.first_year,
            last_year=corpus.last_year,
        )


class ForecastHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall service status")
    prediction_method: PredictionMethod = Field(
        description="Estimator currently answering predictions"
    )
    model_estimator: Optional[str] = Field(
        default=None, description="Class of the loaded estimator"
    )
    corpus: CorpusStatsDTO
    checks: List[ResourceCheckDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: ForecastHealth) -> "ForecastHealthDTO":
        return cls(
            status=health.status,
            prediction_method=health.prediction_method,
            model_estimator=health.model_estimator,
            corpus=CorpusStatsDTO.from_domain(health.corpus),
            checks=[ResourceCheckDTO.from_domain(check) for check in health.checks],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "degraded",
                "prediction_method": "simulation",
                "model_estimator": None,
                "corpus": {
                    "records": 126,
                    "countries": 6,
                    "first_year": 2000,
                    "last_year": 2020,
                },
                "checks": [
                    {
                        "name": "corpus",
                        "status": "up",
                        "message": "126 records for 6 countries (2000-2020)",
                        "checked_at": "2026-01-10T12:00:00Z",
                        "details": {"records": 126, "countries": 6},
                    },
                    {
                        "name": "model",
                        "status": "degraded",
                        "message": "Model not loaded, simulation fallback active",
                        "checked_at": "2026-01-10T12:00:00Z",
                        "details": {"horizon": 2},
                    },
                ],
            }
        }
    }


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    health: ForecastHealthDTO
    extras: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            health=ForecastHealthDTO.from_domain(info.health),
            extras=info.extras,
        )
