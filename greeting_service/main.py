"""Main module entrypoint for local runtime execution.

This module validates startup configuration, serves HTTP until SIGINT or
SIGTERM, and exits after a bounded graceful shutdown.
"""

from greeting_service.bootstrap import bootstrap_create_lifecycle_controller
from greeting_service.config import config_load_settings
from greeting_service.logging_setup import logging_setup_logger


def main() -> None:
    """Run the HTTP service with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when the server fails to start.
    """

    settings = config_load_settings()
    logger = logging_setup_logger(settings.log_level)
    lifecycle_controller = bootstrap_create_lifecycle_controller(settings=settings, logger=logger)
    exit_status = lifecycle_controller.lifecycle_run()
    if exit_status != 0:
        raise SystemExit(exit_status)


if __name__ == "__main__":
    main()
