"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from econ_forecast.application.dtos.health_dto import (
    ApplicationInfoDTO,
    ForecastHealthDTO,
)
from econ_forecast.application.models import SystemInfo
from econ_forecast.domain.entities.health import ApplicationInfo
from econ_forecast.domain.ports.forecasting_model import IForecastHealthCheck


class GetHealthStatusUseCase:
    """Reports whether predictions can be served and by which estimator."""

    def __init__(self, health_check_service: IForecastHealthCheck) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> ForecastHealthDTO:
        health = await self._health_check_service.evaluate()
        return ForecastHealthDTO.from_domain(health)


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(
        self,
        health_check_service: IForecastHealthCheck,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        extras = {
            "environment": self._info.environment,
            "data": {
                "corpus_path": self._info.corpus_path,
                "model_path": self._info.model_path,
            },
            "forecast_api": self._redact_url(self._info.api_base_url),
        }

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=uptime_seconds,
            health=health,
            extras=extras,
        )

        return ApplicationInfoDTO.from_domain(info)

    def _redact_url(self, url: str) -> str:
        if not url:
            return url

        parsed = urlsplit(url)
        if parsed.username or parsed.password:
            hostname = parsed.hostname or ""
            port_part = f":{parsed.port}" if parsed.port else ""
            return urlunsplit(
                (
                    parsed.scheme,
                    f"{hostname}{port_part}",
                    parsed.path,
                    parsed.query,
                    parsed.fragment,
                )
            )

        return url
