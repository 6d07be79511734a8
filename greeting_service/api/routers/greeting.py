"""Greeting endpoint router served at the root path."""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from greeting_service.domain import domain_build_greeting_message, domain_resolve_hostname

from ..rendering import api_render_json


def api_create_greeting_router(logger: logging.Logger) -> APIRouter:
    """Create greeting router.

    Args:
        logger: Logger receiving hostname and encoding failures.

    Returns:
        APIRouter: Router exposing `GET /`.

    Raises:
        ValueError: Raised when logger is None.
    """

    if logger is None:
        raise ValueError("logger must not be None")

    router = APIRouter(tags=["greeting"])

    @router.get("/")
    def api_greeting_message() -> Response:
        """Return the greeting payload with the serving host name.

        Returns:
            Response: JSON greeting payload, HTTP 500 if encoding fails.
        """

        hostname = domain_resolve_hostname(logger)
        return api_render_json(domain_build_greeting_message(hostname), logger=logger, payload_label="hello")

    return router
