"""Server runtime package: socket ownership and process lifecycle."""

from .http_server import (
    IDLE_TIMEOUT_SECONDS,
    READ_TIMEOUT_SECONDS,
    WRITE_TIMEOUT_SECONDS,
    HttpServer,
    ServerStartupError,
    ShutdownTimeoutError,
)
from .interfaces import ServerPort
from .lifecycle import SHUTDOWN_DEADLINE_SECONDS, LifecycleController, LifecycleState
from .timeouts import ConnectionTimeoutMiddleware

__all__ = [
    "IDLE_TIMEOUT_SECONDS",
    "READ_TIMEOUT_SECONDS",
    "SHUTDOWN_DEADLINE_SECONDS",
    "WRITE_TIMEOUT_SECONDS",
    "ConnectionTimeoutMiddleware",
    "HttpServer",
    "LifecycleController",
    "LifecycleState",
    "ServerPort",
    "ServerStartupError",
    "ShutdownTimeoutError",
]
