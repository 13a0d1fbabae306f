"""HTTP listener lifecycle with graceful drain on termination signals."""

import logging
import signal
import socket
from collections.abc import Callable
from types import FrameType

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)


class DrainingServer(uvicorn.Server):
    """Uvicorn server that logs shutdown requests before draining connections.

    On the first termination signal the listener stops accepting connections and
    in-flight requests run to completion with no timeout. The optional
    `on_started` callback runs once the listener is bound, never after a
    failed bind.
    """

    def __init__(self, config: uvicorn.Config, on_started: Callable[[], None] | None = None) -> None:
        super().__init__(config=config)
        self._on_started = on_started

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit and self._on_started is not None:
            self._on_started()

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if not self.should_exit:
            logger.info("%s signal received: closing HTTP server", signal.Signals(sig).name)
        super().handle_exit(sig, frame)


def server_create(
    application: FastAPI,
    host: str,
    port: int,
    on_started: Callable[[], None] | None = None,
) -> DrainingServer:
    """Build the listener for the given application.

    Args:
        application: ASGI application to serve.
        host: Interface to bind.
        port: TCP port to bind.
        on_started: Optional callback invoked after the listener is bound.

    Returns:
        DrainingServer: Configured, not yet started server.
    """

    config = uvicorn.Config(
        application,
        host=host,
        port=port,
        log_config=None,
        timeout_graceful_shutdown=None,
    )
    return DrainingServer(config=config, on_started=on_started)


def _server_exit_cleanly(_signum: int, _frame: FrameType | None) -> None:
    raise SystemExit(0)


def server_install_exit_handlers() -> None:
    """Make termination signals end the process with exit code 0.

    Uvicorn captures these signals while serving and re-delivers them to the
    previously installed handlers once the drain has finished.
    """

    for shutdown_signal in SHUTDOWN_SIGNALS:
        signal.signal(shutdown_signal, _server_exit_cleanly)


def server_run(server: DrainingServer) -> None:
    """Serve until a termination signal has been received and in-flight work is drained.

    Args:
        server: Listener created by `server_create`.

    Raises:
        SystemExit: Raised with code 0 when a re-delivered termination signal ends the process.
    """

    server_install_exit_handlers()
    try:
        server.run()
    finally:
        logger.info("HTTP server closed")
