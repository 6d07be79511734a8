"""Process lifecycle supervision for the HTTP server.

The controller runs the server on a dedicated thread, blocks the main thread
until a termination signal arrives or the server thread dies, then performs a
single deadline-bounded shutdown.
"""

import enum
import logging
import signal
import threading

from .http_server import ShutdownTimeoutError
from .interfaces import ServerPort

SHUTDOWN_DEADLINE_SECONDS = 30.0
TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)
STOP_POLL_INTERVAL_SECONDS = 0.25


class LifecycleState(str, enum.Enum):
    """Lifecycle states; `shutting-down` is terminal."""

    STARTING = "starting"
    RUNNING = "running"
    SHUTTING_DOWN = "shutting-down"


class LifecycleController:
    """Supervise one server from start to exit.

    Attributes:
        state: Current lifecycle state.
        received_signal: Signal number that triggered shutdown, if any.
    """

    def __init__(
        self,
        server: ServerPort,
        logger: logging.Logger,
        shutdown_deadline_seconds: float = SHUTDOWN_DEADLINE_SECONDS,
        termination_signals: tuple[signal.Signals, ...] = TERMINATION_SIGNALS,
    ):
        """Initialize lifecycle controller.

        Args:
            server: Server to run and stop.
            logger: Logger receiving lifecycle lines.
            shutdown_deadline_seconds: Bound passed to `server.shutdown`.
            termination_signals: Signals that trigger graceful shutdown.

        Raises:
            ValueError: Raised when server or logger is None, or the deadline is not positive.
        """

        if server is None:
            raise ValueError("server must not be None")
        if logger is None:
            raise ValueError("logger must not be None")
        if shutdown_deadline_seconds <= 0:
            raise ValueError("shutdown_deadline_seconds must be positive")

        self._server = server
        self._logger = logger
        self._shutdown_deadline_seconds = shutdown_deadline_seconds
        self._termination_signals = termination_signals
        self._stop_event = threading.Event()
        self._server_error: BaseException | None = None
        self.state = LifecycleState.STARTING
        self.received_signal: int | None = None

    def lifecycle_request_stop(self, signal_number: int | None = None) -> None:
        """Wake the supervising thread, as a termination signal would."""

        if self.received_signal is None:
            self.received_signal = signal_number
        self._stop_event.set()

    def lifecycle_run(self) -> int:
        """Run the server until a termination signal, then shut it down.

        Must be called from the main thread so signal handlers can be installed.

        Returns:
            int: Process exit status, 0 after graceful shutdown, 1 on startup failure.
        """

        previous_handlers = self._lifecycle_install_signal_handlers()
        try:
            server_thread = threading.Thread(target=self._lifecycle_serve, name="http-server", daemon=True)
            server_thread.start()
            self.state = LifecycleState.RUNNING

            # Timed waits let the main thread run Python signal handlers when the
            # OS delivered the signal to the server thread.
            while not self._stop_event.wait(timeout=STOP_POLL_INTERVAL_SECONDS):
                pass

            if self._server_error is not None:
                self._logger.critical("Server error: %s", self._server_error)
                return 1

            self.state = LifecycleState.SHUTTING_DOWN
            try:
                self._server.shutdown(self._shutdown_deadline_seconds)
            except ShutdownTimeoutError as error:
                self._logger.warning("Server forced to shutdown: %s", error)
            self._logger.info("Server exited")
            return 0
        finally:
            self._lifecycle_restore_signal_handlers(previous_handlers)

    def _lifecycle_serve(self) -> None:
        try:
            self._server.start()
        except Exception as error:  # pylint: disable=broad-exception-caught
            self._server_error = error
        finally:
            self._stop_event.set()

    def _lifecycle_handle_signal(self, signal_number: int, _frame: object) -> None:
        self.lifecycle_request_stop(signal_number)

    def _lifecycle_install_signal_handlers(self) -> dict[int, object]:
        previous_handlers = {}
        for signal_number in self._termination_signals:
            previous_handlers[signal_number] = signal.signal(signal_number, self._lifecycle_handle_signal)
        return previous_handlers

    @staticmethod
    def _lifecycle_restore_signal_handlers(previous_handlers: dict[int, object]) -> None:
        for signal_number, handler in previous_handlers.items():
            # None means the previous handler was installed outside Python.
            signal.signal(signal_number, signal.SIG_DFL if handler is None else handler)
