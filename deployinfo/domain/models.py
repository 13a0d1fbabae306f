"""Typed domain models shared across runtime layers.

This module provides the application metadata contract and the assembly of
the diagnostic response document.
"""

import platform
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .environment import domain_filter_environment

DIAGNOSTIC_MESSAGE = "CD Pipeline Test Application is running!"


@dataclass(frozen=True)
class AppInfo:
    """Application identity and deployment metadata.

    Attributes:
        name: Application name.
        version: Application version label.
        environment: Deployment environment label.
        deployment_id: Deployment identifier.
    """

    name: str
    version: str
    environment: str
    deployment_id: str


def domain_format_timestamp(moment: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with millisecond precision and `Z` suffix.

    Args:
        moment: Timezone-aware or naive UTC datetime.

    Returns:
        str: Timestamp such as `2026-01-02T03:04:05.678Z`.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def domain_build_diagnostic_response(
    app_info: AppInfo,
    endpoint: str,
    environ: Mapping[str, str],
    now: datetime,
) -> dict[str, Any]:
    """Assemble the diagnostic response document for one request.

    Args:
        app_info: Metadata resolved for this request.
        endpoint: Raw request path including query string.
        environ: Environment snapshot to read container name and exposed variables from.
        now: Response construction time.

    Returns:
        dict[str, Any]: JSON-serializable diagnostic payload.
    """

    return {
        "message": DIAGNOSTIC_MESSAGE,
        "timestamp": domain_format_timestamp(now),
        "name": app_info.name,
        "version": app_info.version,
        "environment": app_info.environment,
        "deploymentId": app_info.deployment_id,
        "endpoint": endpoint,
        "container": environ.get("CONTAINER_NAME") or "unknown",
        "runtime": f"python-{platform.python_version()}",
        "environment-vars": domain_filter_environment(environ),
    }
