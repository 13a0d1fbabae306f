"""API router package for endpoint composition."""

from .diagnostic import PrettyJSONResponse, api_register_diagnostic_route, api_request_endpoint

__all__ = ["PrettyJSONResponse", "api_register_diagnostic_route", "api_request_endpoint"]
