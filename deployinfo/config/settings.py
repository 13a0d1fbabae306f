"""Typed runtime settings with env-file resolution and startup validation."""

import logging
import os
from collections.abc import Iterable, Mapping

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from deployinfo.domain import AppInfo

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "test-cd-app"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_APP_ENV = "development"
DEFAULT_APP_DEPLOYMENT = "local"
DEFAULT_NODE_ENV = "development"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for listener binding and deployment metadata.

    Environment variable names map directly to field names in uppercase.
    Example: `app_deployment` reads from `APP_DEPLOYMENT`.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port.
        app_name: Application name reported by the diagnostic endpoint.
        app_version: Application version label.
        app_env: Deployment environment label.
        app_deployment: Deployment identifier.
        container_name: Name of the container running the service.
        node_env: Runtime environment selector used for env-file lookup.
        env_file_path: Optional explicit env-file path.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)
    app_env: str = Field(default=DEFAULT_APP_ENV)
    app_deployment: str = Field(default=DEFAULT_APP_DEPLOYMENT)
    container_name: str = Field(default="unknown")
    node_env: str = Field(default=DEFAULT_NODE_ENV)
    env_file_path: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator("host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        stripped_value = value.strip()
        return stripped_value or "0.0.0.0"

    @field_validator("app_name", "app_version", "app_env", "app_deployment", "container_name", "node_env")
    @classmethod
    def _fallback_blank_to_default(cls, value: str, info) -> str:
        if value.strip():
            return value
        return cls.model_fields[info.field_name].default

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level_name = value.strip().upper()
        if level_name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level_name


def config_env_file_candidates(environ: Mapping[str, str] | None = None) -> tuple[str | None, ...]:
    """Build the ordered env-file candidate list for startup resolution.

    Args:
        environ: Environment mapping to read selectors from. Defaults to `os.environ`.

    Returns:
        tuple[str | None, ...]: Candidate paths in priority order. Entries may be None.
    """

    source = os.environ if environ is None else environ
    node_env = source.get("NODE_ENV") or DEFAULT_NODE_ENV
    return (
        "./config/.env.deploy",
        "./.env.deploy",
        source.get("ENV_FILE_PATH"),
        f"./.env.{node_env}",
    )


def config_resolve_env_file(candidates: Iterable[str | os.PathLike | None]) -> bool:
    """Load the first existing env file into the process environment.

    Keys already present in the environment are never overridden.

    Args:
        candidates: Ordered candidate paths. Empty or None entries are skipped.

    Returns:
        bool: True when a file was loaded, False when no candidate exists.
    """

    for candidate in candidates:
        if not candidate:
            continue
        if not os.path.exists(candidate):
            continue
        load_dotenv(dotenv_path=candidate, override=False)
        logger.info("Loaded environment file %s", os.fspath(candidate))
        return True

    logger.warning("No environment file found; using process environment and defaults")
    return False


def config_get_app_info(environ: Mapping[str, str] | None = None) -> AppInfo:
    """Derive application metadata from the current environment.

    Args:
        environ: Environment mapping to read. Defaults to `os.environ`.

    Returns:
        AppInfo: Metadata with defaults applied for unset or empty variables.
    """

    source = os.environ if environ is None else environ
    return AppInfo(
        name=source.get("APP_NAME") or DEFAULT_APP_NAME,
        version=source.get("APP_VERSION") or DEFAULT_APP_VERSION,
        environment=source.get("APP_ENV") or DEFAULT_APP_ENV,
        deployment_id=source.get("APP_DEPLOYMENT") or DEFAULT_APP_DEPLOYMENT,
    )


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from the process environment.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update the env file or environment variables. Details: {error}"
        ) from error


def config_configure_logging(level: str = "INFO") -> None:
    """Configure root logging for operator-facing runtime output."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
