"""Typed response models returned by the HTTP surface.

Both models are immutable and built fresh for every request. Timestamps are
timezone-aware so their JSON form is a valid RFC 3339 string.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

HEALTH_STATUS_TEXT = "healthy"
SERVICE_VERSION = "1.0.0"
GREETING_MESSAGE_TEXT = "Hello, World!"


class HealthStatus(BaseModel):
    """Health response contract used by the health-check endpoint.

    Attributes:
        status: Liveness label, always `healthy` for a responding process.
        timestamp: Process-local time at response construction.
        version: Build version of the service.
    """

    model_config = ConfigDict(frozen=True)

    status: str
    timestamp: datetime
    version: str


class GreetingMessage(BaseModel):
    """Greeting response contract used by the root endpoint.

    Attributes:
        message: Fixed greeting text.
        timestamp: Process-local time at response construction.
        hostname: Host name of the machine serving the request.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    timestamp: datetime
    hostname: str


def _domain_current_time() -> datetime:
    return datetime.now().astimezone()


def domain_build_health_status(now: datetime | None = None) -> HealthStatus:
    """Build a health payload stamped with the current time.

    Args:
        now: Optional fixed timestamp, used by tests.

    Returns:
        HealthStatus: Health payload with constant status and version.
    """

    return HealthStatus(
        status=HEALTH_STATUS_TEXT,
        timestamp=now or _domain_current_time(),
        version=SERVICE_VERSION,
    )


def domain_build_greeting_message(hostname: str, now: datetime | None = None) -> GreetingMessage:
    """Build a greeting payload stamped with the current time.

    Args:
        hostname: Resolved host name, or the unknown fallback.
        now: Optional fixed timestamp, used by tests.

    Returns:
        GreetingMessage: Greeting payload with constant message text.
    """

    return GreetingMessage(
        message=GREETING_MESSAGE_TEXT,
        timestamp=now or _domain_current_time(),
        hostname=hostname,
    )
