"""FastAPI application factory for the greeting service."""

import logging

from fastapi import FastAPI

from greeting_service.domain import SERVICE_VERSION

from .middleware import RequestLoggingMiddleware
from .routers import api_create_greeting_router, api_create_health_router


def create_api_application(logger: logging.Logger) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Only `GET /health` and `GET /` are routed. Documentation endpoints and
    trailing-slash redirects are disabled so every other path falls through
    to the framework's 404.

    Args:
        logger: Logger shared by middleware and handlers.

    Returns:
        FastAPI: Application with both routers and request logging applied.

    Raises:
        ValueError: Raised when logger is None.
    """

    if logger is None:
        raise ValueError("logger must not be None")

    application = FastAPI(
        title="Greeting Service",
        version=SERVICE_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    application.include_router(api_create_health_router(logger=logger))
    application.include_router(api_create_greeting_router(logger=logger))
    application.add_middleware(RequestLoggingMiddleware, logger=logger)
    return application
