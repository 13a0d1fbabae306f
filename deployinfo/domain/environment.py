"""Environment snapshot filtering for diagnostic payloads."""

from collections.abc import Mapping
from typing import Final

EXPOSED_ENVIRONMENT_PREFIX: Final[str] = "APP_"
EXPOSED_ENVIRONMENT_KEYS: Final[frozenset[str]] = frozenset({"PORT", "HOST", "NODE_ENV"})


def domain_is_exposed_environment_key(key: str) -> bool:
    """Return whether an environment variable may appear in diagnostic output.

    Args:
        key: Environment variable name.

    Returns:
        bool: True for `APP_`-prefixed names and the exact allow-listed names.
    """

    return key.startswith(EXPOSED_ENVIRONMENT_PREFIX) or key in EXPOSED_ENVIRONMENT_KEYS


def domain_filter_environment(environ: Mapping[str, str]) -> dict[str, str]:
    """Copy the exposed subset of an environment mapping.

    Iteration order follows the source mapping.
    """

    return {key: value for key, value in environ.items() if domain_is_exposed_environment_key(key)}
