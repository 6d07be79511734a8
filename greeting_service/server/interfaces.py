"""Typed interfaces for the server runtime layer."""

from typing import Protocol


class ServerPort(Protocol):
    """Port definition for a blocking server supervised by the lifecycle controller."""

    @property
    def address(self) -> str:
        """Return the listen address in `:<port>` form.

        Returns:
            str: Listen address label for diagnostics.
        """

    def start(self) -> None:
        """Serve until the socket is closed.

        Returns:
            None: Returns normally after an explicit shutdown request.

        Raises:
            ServerStartupError: Raised on any other termination cause.
        """

    def shutdown(self, deadline_seconds: float) -> None:
        """Stop accepting connections and drain in-flight ones.

        Args:
            deadline_seconds: Upper bound for the drain.

        Raises:
            ShutdownTimeoutError: Raised when the deadline elapses first.
        """
