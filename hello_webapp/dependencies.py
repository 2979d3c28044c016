"""FastAPI dependencies for dependency injection."""

import fastapi
from fastapi import Depends, Request

from hello_webapp.config import Settings, get_settings


async def get_server_info(request: Request, settings: Settings = Depends(get_settings)) -> str:
    """
    Describe the hosting server for the greeting page.

    Args:
        request: The FastAPI request object.
        settings: Settings instance; a non-empty ``server_info`` wins.

    Returns:
        Server info string, e.g. ``Hello WebApp/1.0.0 (FastAPI 0.115.0)``.
    """
    if settings.server_info:
        return settings.server_info

    app = request.app
    return f"{app.title}/{app.version} (FastAPI {fastapi.__version__})"


async def get_servlet_name(request: Request) -> str:
    """
    Get the display name of the endpoint handling this request.

    Args:
        request: The FastAPI request object.

    Returns:
        Dotted path of the matched endpoint function.

    Raises:
        RuntimeError: If no route has been matched yet.
    """
    endpoint = request.scope.get("endpoint")

    if endpoint is None:
        raise RuntimeError("No endpoint matched for this request.")

    return f"{endpoint.__module__}.{endpoint.__name__}"
