"""
Logging Configuration - Shared Layer

structlog on top of the standard logging module: every record, whether
emitted through structlog or a plain stdlib logger, is rendered by the
same processor chain. Development gets a console renderer, production
gets one JSON object per line.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from econ_forecast.shared.consts import (
    DEFAULT_LOG_FORMAT,
    QUIET_LOGGERS,
    SERVICE_NAME,
    EnumEnvironment,
)


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """Bootstrap configuration read before the settings are available."""
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _add_service_name(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure structlog and the standard logging root logger.

    Call it once at startup with no arguments for early logging, then again
    through ``update_logging_from_settings`` once the settings are loaded.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        format_string: Kept for settings compatibility; rendering is done
            by structlog processors.
        file_path: Optional log file written in addition to stdout.
        environment: Deployment environment; production renders JSON.
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_file = file_path or env_config["file_path"]
    env_value = (environment or env_config["environment"] or "development").lower()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    renderer: Processor
    if env_value == EnumEnvironment.PRODUCTION.value:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    logging.getLogger(__name__).info(
        "logging.configured level=%s environment=%s file=%s",
        log_level,
        env_value,
        log_file,
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the fully loaded application settings.

    Args:
        settings: Object exposing ``logging.level``, ``logging.format``,
            ``logging.file_path`` and ``environment``.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError) as e:
        logging.getLogger(__name__).error(
            "logging.update_failed error=%s", e, exc_info=e
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
