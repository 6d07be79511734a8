"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from greeting_service.api import create_api_application
from greeting_service.config import AppSettings
from greeting_service.server import HttpServer, LifecycleController


def bootstrap_create_server(settings: AppSettings, logger: logging.Logger) -> HttpServer:
    """Assemble the server wrapper around a freshly built application.

    Args:
        settings: Validated runtime settings.
        logger: Process logger shared by every component.

    Returns:
        HttpServer: Server bound to the configured host and port, not yet started.

    Raises:
        ValueError: Raised when the configured port is invalid.
    """

    application = create_api_application(logger=logger)
    return HttpServer(port=settings.port, application=application, logger=logger, host=settings.host)


def bootstrap_create_lifecycle_controller(settings: AppSettings, logger: logging.Logger) -> LifecycleController:
    """Build the lifecycle controller supervising the configured server.

    Returns:
        LifecycleController: Controller ready to run from the main thread.
    """

    return LifecycleController(server=bootstrap_create_server(settings=settings, logger=logger), logger=logger)
