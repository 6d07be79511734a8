"""Per-request read and write deadlines for the ASGI surface.

uvicorn bounds idle keep-alive connections itself; request body reads and
response writes are bounded here.
"""

import asyncio
import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send


class ConnectionTimeoutMiddleware:
    """Abort requests whose body read or response write stalls past a deadline."""

    def __init__(
        self,
        app: ASGIApp,
        read_timeout_seconds: float,
        write_timeout_seconds: float,
        logger: logging.Logger,
    ):
        """Initialize middleware.

        Args:
            app: Downstream ASGI application.
            read_timeout_seconds: Limit for each request body read.
            write_timeout_seconds: Limit for each response message write.
            logger: Logger receiving timeout failures.

        Raises:
            ValueError: Raised when a timeout is not positive.
        """

        if read_timeout_seconds <= 0 or write_timeout_seconds <= 0:
            raise ValueError("timeouts must be positive")
        self.app = app
        self.read_timeout_seconds = read_timeout_seconds
        self.write_timeout_seconds = write_timeout_seconds
        self._logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        body_complete = False

        async def receive_with_deadline() -> Message:
            nonlocal body_complete
            # After the body is read, receive only waits for disconnect.
            if body_complete:
                return await receive()
            message = await asyncio.wait_for(receive(), timeout=self.read_timeout_seconds)
            if message["type"] != "http.request" or not message.get("more_body", False):
                body_complete = True
            return message

        async def send_with_deadline(message: Message) -> None:
            await asyncio.wait_for(send(message), timeout=self.write_timeout_seconds)

        try:
            await self.app(scope, receive_with_deadline, send_with_deadline)
        except asyncio.TimeoutError:
            self._logger.warning(
                "Request %s %s exceeded connection deadline (read %.0fs, write %.0fs)",
                scope.get("method", "-"),
                scope.get("path", "-"),
                self.read_timeout_seconds,
                self.write_timeout_seconds,
            )
            raise
