"""Middleware configuration."""

from fastapi import FastAPI

from hello_webapp.logging_config import get_logger, log_with_context
from hello_webapp.middleware.logging_middleware import log_requests

logger = get_logger(__name__)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
    """
    log_with_context(
        logger,
        "info",
        "Configuring request logging middleware",
        event_type="middleware_config",
    )
    app.middleware("http")(log_requests)

    # Registered last so it runs outermost and counts every request
    @app.middleware("http")
    async def count_requests(request, call_next):
        """Count total requests served since startup."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        response = await call_next(request)
        return response
