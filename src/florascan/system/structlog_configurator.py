"""Structlog-based logging configuration for FloraScan.

Supports different deployment targets:
- Docker: Uses stdout with structured output
- Development: Configurable JSON or human-readable output
"""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import structlog

from florascan import __version__
from florascan.config.models import FloraScanConfig


def is_docker_environment() -> bool:
    """Check if running in a Docker container."""
    return os.path.exists("/.dockerenv") or os.environ.get("DOCKER_CONTAINER") == "true"


def is_development_environment() -> bool:
    """Check if FLORASCAN_ENV marks this as a development run."""
    return os.environ.get("FLORASCAN_ENV", "production") == "development"


def get_deployment_environment() -> str:
    """Get deployment environment with 'unknown' fallback."""
    if is_docker_environment():
        return "docker"
    elif is_development_environment():
        return "development"
    else:
        return "unknown"


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _configure_processors(config: FloraScanConfig, is_docker: bool, is_development: bool) -> list:
    """Configure structlog processors based on environment."""
    extra_fields = {
        "service": "florascan",
        "version": __version__,
        "deployment": get_deployment_environment(),
        **config.logging.extra_fields,  # Allow config to override/add fields
    }

    if config.site_name:
        extra_fields["site_name"] = config.site_name

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    # Auto-detect: JSON for Docker, human-readable otherwise
    use_json = config.logging.json_logs
    if use_json is None:
        use_json = is_docker and not is_development

    if is_development and os.environ.get("FLORASCAN_JSON_LOGS", "false").lower() == "true":
        use_json = True

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def _configure_handlers(config: FloraScanConfig) -> None:
    """Route the standard library root logger to stdout."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)


def configure_structlog(config: FloraScanConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The FloraScanConfig instance containing logging settings.
    """
    is_docker = is_docker_environment()
    is_development = is_development_environment()

    processors = _configure_processors(config, is_docker, is_development)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Structured logging configured",
        version=__version__,
        log_level=config.logging.level,
        environment=get_deployment_environment(),
        json_output=config.logging.json_logs,
    )

