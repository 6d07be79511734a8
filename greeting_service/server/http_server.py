"""uvicorn-backed server wrapper owning the listening socket."""

import logging
import threading

import uvicorn
from starlette.types import ASGIApp

from .timeouts import ConnectionTimeoutMiddleware

READ_TIMEOUT_SECONDS = 15.0
WRITE_TIMEOUT_SECONDS = 15.0
IDLE_TIMEOUT_SECONDS = 60


class ServerStartupError(RuntimeError):
    """Raised when the server stops serving without a shutdown request."""


class ShutdownTimeoutError(RuntimeError):
    """Raised when in-flight connections are still open at the shutdown deadline."""


class HttpServer:
    """Blocking HTTP server with graceful, deadline-bounded shutdown.

    `start` runs uvicorn's event loop on the calling thread. Because uvicorn
    only installs its own signal handlers on the main thread, running `start`
    on a worker thread leaves signal handling to the caller.
    """

    def __init__(self, port: str, application: ASGIApp, logger: logging.Logger, host: str = "0.0.0.0"):
        """Initialize server wrapper.

        Args:
            port: TCP port as text, e.g. `"8080"`.
            application: ASGI application to serve.
            logger: Logger receiving lifecycle lines.
            host: Interface to bind.

        Raises:
            ValueError: Raised when port is not a valid TCP port or inputs are missing.
        """

        port_text = str(port).strip()
        if not port_text.isdigit() or not 1 <= int(port_text) <= 65535:
            raise ValueError(f"invalid port: {port!r}")
        if application is None:
            raise ValueError("application must not be None")
        if logger is None:
            raise ValueError("logger must not be None")

        self._port = port_text
        self._logger = logger
        self._shutdown_requested = threading.Event()
        self._start_called = threading.Event()
        self._stopped = threading.Event()
        self.config = uvicorn.Config(
            ConnectionTimeoutMiddleware(
                application,
                read_timeout_seconds=READ_TIMEOUT_SECONDS,
                write_timeout_seconds=WRITE_TIMEOUT_SECONDS,
                logger=logger,
            ),
            host=host,
            port=int(port_text),
            timeout_keep_alive=IDLE_TIMEOUT_SECONDS,
            access_log=False,
            log_config=None,
            lifespan="off",
        )
        self._server = uvicorn.Server(self.config)

    @property
    def address(self) -> str:
        """Return the listen address in `:<port>` form."""

        return f":{self._port}"

    @property
    def started(self) -> bool:
        """Return whether the socket is bound and accepting connections."""

        return bool(self._server.started)

    def start(self) -> None:
        """Serve until shutdown is requested.

        Returns:
            None: Returns normally after `shutdown` was called.

        Raises:
            ServerStartupError: Raised when binding fails or serving stops unexpectedly.
        """

        self._logger.info("Starting server on port %s", self.address)
        self._start_called.set()
        try:
            self._server.run()
        except SystemExit as error:
            # uvicorn exits with status 1 when the socket cannot be bound.
            raise ServerStartupError(f"server on {self.address} failed to start (exit status {error.code})") from error
        finally:
            self._stopped.set()

        if not self._shutdown_requested.is_set():
            raise ServerStartupError(f"server on {self.address} stopped without a shutdown request")

    def shutdown(self, deadline_seconds: float) -> None:
        """Stop accepting connections and drain in-flight ones before the deadline.

        Args:
            deadline_seconds: Upper bound for closing the socket and draining.

        Raises:
            ShutdownTimeoutError: Raised when the server is still running at the deadline.
        """

        self._logger.info("Shutting down server...")
        self._shutdown_requested.set()
        if not self._start_called.is_set():
            return

        # uvicorn drains without a bound of its own; force_exit ends the drain at the deadline.
        self._server.should_exit = True
        if not self._stopped.wait(timeout=deadline_seconds):
            self._server.force_exit = True
            raise ShutdownTimeoutError(f"in-flight connections still open after {deadline_seconds:g}s")
