"""Domain models used across application layer boundaries."""

from .environment import (
    EXPOSED_ENVIRONMENT_KEYS,
    EXPOSED_ENVIRONMENT_PREFIX,
    domain_filter_environment,
    domain_is_exposed_environment_key,
)
from .models import DIAGNOSTIC_MESSAGE, AppInfo, domain_build_diagnostic_response, domain_format_timestamp

__all__ = [
    "AppInfo",
    "DIAGNOSTIC_MESSAGE",
    "EXPOSED_ENVIRONMENT_KEYS",
    "EXPOSED_ENVIRONMENT_PREFIX",
    "domain_build_diagnostic_response",
    "domain_filter_environment",
    "domain_format_timestamp",
    "domain_is_exposed_environment_key",
]
