"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from hello_webapp import __version__
from hello_webapp.core.lifespan import lifespan
from hello_webapp.core.middleware import setup_middleware
from hello_webapp.middleware.error_handlers import register_error_handlers
from hello_webapp.routers import health_router, hello_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Hello WebApp",
        description="""
        Greeting page service.

        - `/hello` - HTML greeting page (GET or POST, optional `name` parameter)
        - `/health` - Basic health check
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app)

    register_error_handlers(app)

    # HTML views - no prefix
    app.include_router(hello_router.router, tags=["views"])

    app.include_router(health_router.router, tags=["health"])

    return app
