"""Configuration package for runtime settings and env-file resolution."""

from .settings import (
    AppSettings,
    SettingsLoadError,
    config_configure_logging,
    config_env_file_candidates,
    config_get_app_info,
    config_load_settings,
    config_resolve_env_file,
)

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "config_configure_logging",
    "config_env_file_candidates",
    "config_get_app_info",
    "config_load_settings",
    "config_resolve_env_file",
]
