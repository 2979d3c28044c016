"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hello_webapp import __version__
from hello_webapp.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are logged and re-raised so the server sees them.
    """
    app.state.startup_time = time.time()
    app.state.request_count = 0

    log_with_context(
        logger,
        "info",
        "Starting Hello WebApp application",
        version=__version__,
        event_type="app_startup",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        uptime_seconds = int(time.time() - app.state.startup_time)
        log_with_context(
            logger,
            "info",
            "Shutting down Hello WebApp application",
            uptime_seconds=uptime_seconds,
            total_requests=app.state.request_count,
            event_type="app_shutdown",
        )
