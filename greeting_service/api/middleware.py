"""Request logging middleware applied to every route.

The middleware is a plain ASGI wrapper so the request line is written only
after the downstream application has finished sending its response.
"""

import logging
import time

from starlette.types import ASGIApp, Receive, Scope, Send


class RequestLoggingMiddleware:
    """Log method, URI, remote address and duration for each HTTP request.

    Attributes:
        app: Downstream ASGI application.
    """

    def __init__(self, app: ASGIApp, logger: logging.Logger):
        """Initialize middleware.

        Args:
            app: Downstream ASGI application.
            logger: Logger receiving one line per request.

        Raises:
            ValueError: Raised when logger is None.
        """

        if logger is None:
            raise ValueError("logger must not be None")
        self.app = app
        self._logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started_at = time.perf_counter()
        try:
            await self.app(scope, receive, send)
        finally:
            elapsed_seconds = time.perf_counter() - started_at
            self._logger.info(
                "%s %s %s %s",
                scope["method"],
                middleware_request_uri(scope),
                middleware_remote_address(scope),
                middleware_format_duration(elapsed_seconds),
            )


def middleware_request_uri(scope: Scope) -> str:
    """Return the request target as sent by the client, query string included."""

    raw_path = scope.get("raw_path")
    path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else scope.get("path", "/")
    query_string = scope.get("query_string", b"")
    if query_string:
        return f"{path}?{query_string.decode('latin-1')}"
    return path


def middleware_remote_address(scope: Scope) -> str:
    """Return `host:port` of the peer (IPv6 hosts bracketed), or `-` when unknown."""

    client = scope.get("client")
    if not client:
        return "-"
    host, port = client
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def middleware_format_duration(elapsed_seconds: float) -> str:
    """Render a duration with a unit suffix, e.g. `1.234ms` or `2.5s`."""

    if elapsed_seconds >= 1.0:
        return f"{elapsed_seconds:.3f}s"
    if elapsed_seconds >= 0.001:
        return f"{elapsed_seconds * 1000:.3f}ms"
    return f"{elapsed_seconds * 1_000_000:.3f}µs"
