"""Catch-all diagnostic route reporting deployment metadata."""

import json
import os
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from deployinfo.config import config_get_app_info
from deployinfo.domain import domain_build_diagnostic_response


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with a two-space indent.

    Lone surrogates, as produced by `os.environ` for undecodable bytes, are
    written as JSON `\\uXXXX` escapes.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8", errors="backslashreplace")


def _default_environ_reader() -> Mapping[str, str]:
    return os.environ


def _default_clock() -> datetime:
    return datetime.now(timezone.utc)


def api_request_endpoint(request: Request) -> str:
    """Return the request target exactly as received, including the query string.

    Args:
        request: Incoming request.

    Returns:
        str: Raw path with `?query` appended when a query string is present.
    """

    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
    query_string = request.scope.get("query_string", b"")
    if query_string:
        return f"{path}?{query_string.decode('latin-1')}"
    return path


def api_register_diagnostic_route(
    application: FastAPI,
    environ_reader: Callable[[], Mapping[str, str]] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> None:
    """Register the route that answers every method and path with the diagnostic payload.

    The route is added to the application directly, without `methods`, so
    extension methods such as TRACE or PURGE reach the handler as well.

    Args:
        application: Application receiving the catch-all route.
        environ_reader: Callable returning the live environment mapping. Invoked per request.
        clock: Callable returning the current time. Invoked per request.
    """

    read_environ = environ_reader or _default_environ_reader
    read_clock = clock or _default_clock

    def api_diagnostic_status(request: Request) -> PrettyJSONResponse:
        """Return deployment metadata for the current request.

        Returns:
            PrettyJSONResponse: Diagnostic payload, always HTTP 200.
        """

        environ = read_environ()
        payload = domain_build_diagnostic_response(
            app_info=config_get_app_info(environ),
            endpoint=api_request_endpoint(request),
            environ=environ,
            now=read_clock(),
        )
        return PrettyJSONResponse(content=payload, status_code=status.HTTP_200_OK)

    application.add_route("/{request_path:path}", api_diagnostic_status, include_in_schema=False)
