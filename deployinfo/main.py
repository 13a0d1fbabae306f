"""Main module entrypoint for local runtime execution.

This module resolves startup configuration and launches the HTTP service.
"""

import argparse
import logging
import sys

from deployinfo.bootstrap import bootstrap_create_application, bootstrap_load_settings, bootstrap_log_startup
from deployinfo.config import SettingsLoadError, config_configure_logging
from deployinfo.server import server_create, server_run

logger = logging.getLogger(__name__)


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Returns:
        argparse.ArgumentParser: Parser for listener overrides.
    """

    argument_parser = argparse.ArgumentParser(description="Deployment info service runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Override the listener interface resolved from HOST",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Override the listener port resolved from PORT",
    )
    return argument_parser


def main(argv: list[str] | None = None) -> None:
    """Run the service with validated startup configuration.

    Args:
        argv: Optional argument list. Defaults to `sys.argv[1:]`.

    Raises:
        SystemExit: Raised with code 1 when configuration validation fails,
            and with code 0 when a termination signal ends the process.
    """

    parsed_arguments = main_build_argument_parser().parse_args(argv)
    config_configure_logging()

    try:
        settings = bootstrap_load_settings()
    except SettingsLoadError as error:
        logger.error("%s", error)
        raise SystemExit(1) from error

    logging.getLogger().setLevel(settings.log_level)
    host = parsed_arguments.host if parsed_arguments.host is not None else settings.host
    port = parsed_arguments.port if parsed_arguments.port is not None else settings.port

    application = bootstrap_create_application(settings)
    server = server_create(
        application,
        host=host,
        port=port,
        on_started=lambda: bootstrap_log_startup(settings, host=host, port=port),
    )
    server_run(server)


if __name__ == "__main__":
    main(sys.argv[1:])
