"""Domain models used across application layer boundaries."""

from .hostname import UNKNOWN_HOSTNAME, domain_resolve_hostname
from .models import (
    GREETING_MESSAGE_TEXT,
    HEALTH_STATUS_TEXT,
    SERVICE_VERSION,
    GreetingMessage,
    HealthStatus,
    domain_build_greeting_message,
    domain_build_health_status,
)

__all__ = [
    "GREETING_MESSAGE_TEXT",
    "HEALTH_STATUS_TEXT",
    "SERVICE_VERSION",
    "UNKNOWN_HOSTNAME",
    "GreetingMessage",
    "HealthStatus",
    "domain_build_greeting_message",
    "domain_build_health_status",
    "domain_resolve_hostname",
]
