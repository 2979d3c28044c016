"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi.responses import Response

from hello_webapp.config import get_settings
from hello_webapp.core.app_factory import create_app
from hello_webapp.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
setup_logging(get_settings())

app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Hello WebApp", "hello": "/hello", "docs": "/docs"}


@app.get("/favicon.ico")
async def favicon():
    """Return empty favicon to prevent 404 errors."""
    return Response(content=b"", media_type="image/x-icon")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hello_webapp.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
