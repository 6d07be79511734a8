"""Health endpoint router reporting process liveness."""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from greeting_service.domain import domain_build_health_status

from ..rendering import api_render_json


def api_create_health_router(logger: logging.Logger) -> APIRouter:
    """Create health-check router.

    Args:
        logger: Logger receiving response encoding failures.

    Returns:
        APIRouter: Router exposing `GET /health`.

    Raises:
        ValueError: Raised when logger is None.
    """

    if logger is None:
        raise ValueError("logger must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> Response:
        """Return the fixed health payload stamped with the current time.

        Returns:
            Response: JSON health payload, HTTP 500 if encoding fails.
        """

        return api_render_json(domain_build_health_status(), logger=logger, payload_label="health")

    return router
