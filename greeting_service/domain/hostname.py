"""Host name resolution with a non-fatal fallback."""

import logging
import socket

UNKNOWN_HOSTNAME = "unknown"


def domain_resolve_hostname(logger: logging.Logger) -> str:
    """Return the local machine host name.

    Args:
        logger: Logger receiving the resolution failure, if any.

    Returns:
        str: Host name, or `unknown` when the lookup fails or yields nothing.
    """

    try:
        hostname = socket.gethostname()
    except OSError as error:
        logger.error("Error getting hostname: %s", error)
        return UNKNOWN_HOSTNAME
    if not hostname:
        logger.error("Error getting hostname: empty host name")
        return UNKNOWN_HOSTNAME
    return hostname
