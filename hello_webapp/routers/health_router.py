"""Health endpoint."""

from fastapi import APIRouter

from hello_webapp import __version__
from hello_webapp.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for container healthchecks and basic monitoring.
    """
    return HealthResponse(status="ok", version=__version__)
