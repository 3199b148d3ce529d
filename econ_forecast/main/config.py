"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from econ_forecast.shared import EnumEnvironment, EnumLogLevel
from econ_forecast.shared.consts import DEFAULT_LOG_FORMAT
from econ_forecast.shared.env import load_secret_file_variables


class GESettings(BaseSettings):
    """Service identity and HTTP server settings."""

    title: str = Field(default="Econ Forecast", description="Service title")
    description: str = Field(
        default="GDP growth forecasting from macroeconomic indicator scenarios",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class DataSettings(BaseSettings):
    """Historical corpus and trained model locations."""

    corpus_path: str = Field(
        default="data/gdp_indicators.csv",
        description="CSV file with one row per (country, year)",
    )
    model_path: Optional[str] = Field(
        default=None,
        description="joblib artifact of the trained regressor (simulation only if unset)",
    )
    cut_year: int = Field(
        default=2015,
        description="First year of the test partition",
    )

    model_config = SettingsConfigDict(
        env_prefix="DATA_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Forecast rendering and remote forecasting service settings."""

    horizon: int = Field(
        default=2, ge=1, description="Number of forecast years appended to a timeline"
    )
    compounding_factor: float = Field(
        default=1.05, gt=0, description="Growth factor between forecast years"
    )
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL used by the forecast API client",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Deadline in seconds for client requests"
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(default=DEFAULT_LOG_FORMAT, description="Logging format")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    data: DataSettings = Field(default_factory=DataSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Secret files referenced through ``*_FILE`` variables are resolved first.
    Used to be mocked in tests, allowing different settings based on environment.
    """
    load_secret_file_variables()
    return AppSettings()
