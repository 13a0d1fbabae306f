"""Regression tests for environment filtering and diagnostic payload assembly."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from deployinfo.domain import (
    AppInfo,
    domain_build_diagnostic_response,
    domain_filter_environment,
    domain_format_timestamp,
    domain_is_exposed_environment_key,
)


@pytest.mark.parametrize("key", ["APP_", "APP_NAME", "APP_CUSTOM_FLAG", "PORT", "HOST", "NODE_ENV"])
def test_domain_is_exposed_environment_key_accepts_prefix_and_allow_list(key: str) -> None:
    """Accept `APP_` prefixed names and exact allow-listed names."""

    assert domain_is_exposed_environment_key(key) is True


@pytest.mark.parametrize("key", ["app_name", "MY_APP_NAME", "HOSTNAME", "PORTS", "NODE", "PATH", "APP", ""])
def test_domain_is_exposed_environment_key_rejects_everything_else(key: str) -> None:
    """Reject lowercase, infix and near-miss names."""

    assert domain_is_exposed_environment_key(key) is False


def test_domain_filter_environment_keeps_exactly_exposed_keys() -> None:
    """Keep exposed keys with their values and drop all others.

    Returns:
        None: Assertions validate filtered mapping.

    Raises:
        AssertionError: Raised when a key leaks or is dropped.
    """

    environ = {"APP_A": "1", "HOST": "h", "SECRET": "s", "HOSTNAME": "n", "NODE_ENV": "test"}

    assert domain_filter_environment(environ) == {"APP_A": "1", "HOST": "h", "NODE_ENV": "test"}


def test_domain_format_timestamp_renders_utc_with_milliseconds() -> None:
    """Render aware and naive datetimes in UTC with a `Z` suffix."""

    offset_moment = datetime(2026, 1, 2, 5, 4, 5, 678900, tzinfo=timezone(timedelta(hours=2)))

    assert domain_format_timestamp(offset_moment) == "2026-01-02T03:04:05.678Z"
    assert domain_format_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02T03:04:05.000Z"


def test_domain_build_diagnostic_response_flattens_app_info() -> None:
    """Flatten AppInfo fields and attach request and environment details.

    Returns:
        None: Assertions validate payload structure.

    Raises:
        AssertionError: Raised when payload fields differ.
    """

    payload = domain_build_diagnostic_response(
        app_info=AppInfo(name="svc", version="2.0.0", environment="prod", deployment_id="d-1"),
        endpoint="/status?verbose=1",
        environ={"CONTAINER_NAME": "svc-0", "APP_NAME": "svc", "TOKEN": "t"},
        now=datetime(2026, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
    )

    assert payload["name"] == "svc"
    assert payload["version"] == "2.0.0"
    assert payload["environment"] == "prod"
    assert payload["deploymentId"] == "d-1"
    assert payload["endpoint"] == "/status?verbose=1"
    assert payload["container"] == "svc-0"
    assert payload["timestamp"] == "2026-05-06T07:08:09.000Z"
    assert payload["environment-vars"] == {"APP_NAME": "svc"}
