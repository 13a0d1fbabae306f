"""FastAPI application factory for the deployment info service."""

from collections.abc import Callable, Mapping
from datetime import datetime

from fastapi import FastAPI

from deployinfo.config import AppSettings

from .routers import api_register_diagnostic_route


def create_api_application(
    settings: AppSettings,
    environ_reader: Callable[[], Mapping[str, str]] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Documentation routes are disabled so the diagnostic route answers every path.

    Args:
        settings: Validated application settings used for application metadata.
        environ_reader: Optional live environment reader used per request.
        clock: Optional clock used per request.

    Returns:
        FastAPI: Framework application instance with the diagnostic route.
    """

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    api_register_diagnostic_route(application, environ_reader=environ_reader, clock=clock)
    return application
