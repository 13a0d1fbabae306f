"""Application bootstrap wiring for env-file resolution and settings validation."""

import logging

from fastapi import FastAPI

from deployinfo.api import create_api_application
from deployinfo.config import AppSettings, config_env_file_candidates, config_load_settings, config_resolve_env_file

logger = logging.getLogger(__name__)


def bootstrap_load_settings() -> AppSettings:
    """Resolve the env file once and load validated runtime settings.

    The process environment is written here, before any listener exists, and
    is only read afterwards.

    Returns:
        AppSettings: Validated runtime settings.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    config_resolve_env_file(config_env_file_candidates())
    return config_load_settings()


def bootstrap_create_application(settings: AppSettings) -> FastAPI:
    """Assemble the runtime application.

    Args:
        settings: Validated runtime settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.
    """

    return create_api_application(settings=settings)


def bootstrap_log_startup(settings: AppSettings, host: str, port: int) -> None:
    """Log the operator-facing startup summary."""

    logger.info("Server running at http://%s:%s/", host, port)
    logger.info("Environment: %s", settings.app_env)
    logger.info("Deployment ID: %s", settings.app_deployment)
    logger.info("Container: %s", settings.container_name)
