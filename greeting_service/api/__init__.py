"""API layer package for FastAPI application and route composition."""

from .application import create_api_application
from .middleware import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware", "create_api_application"]
