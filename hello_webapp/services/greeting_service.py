"""Greeting service: parameter resolution and render context assembly."""

from datetime import datetime

from fastapi import Request

from hello_webapp.models.greeting import RenderContext

NAME_PARAM = "name"
DEFAULT_NAME = "World"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


async def collect_name_values(request: Request) -> list[str]:
    """Collect every supplied ``name`` value in arrival order.

    Query-string values come first. For POST requests, values from a
    url-encoded or multipart form body follow. Bodies of any other content
    type decode to an empty form and contribute nothing.

    Args:
        request: FastAPI request object

    Returns:
        List of raw (untrimmed) values, possibly empty
    """
    values = request.query_params.getlist(NAME_PARAM)
    if request.method == "POST":
        async with request.form() as form:
            # File uploads named "name" are not greetings
            values.extend(v for v in form.getlist(NAME_PARAM) if isinstance(v, str))
    return values


def resolve_effective_name(values: list[str]) -> str:
    """Pick the name to greet.

    Only the first value counts. An absent or whitespace-only value falls back
    to ``DEFAULT_NAME``; anything else is returned as supplied, untrimmed.
    """
    if not values:
        return DEFAULT_NAME
    first = values[0]
    if not first.strip():
        return DEFAULT_NAME
    return first


def format_timestamp(now: datetime | None = None) -> str:
    """Format a server-local timestamp as ``yyyy-MM-dd HH:mm:ss``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def build_render_context(
    request: Request,
    names: list[str],
    server_info: str,
    servlet_name: str,
    now: datetime | None = None,
) -> RenderContext:
    """Build the render context for one greeting page.

    Args:
        request: FastAPI request object
        names: Raw ``name`` values from collect_name_values
        server_info: Host server description
        servlet_name: Display name of the handling endpoint
        now: Timestamp override (defaults to the current local time)

    Returns:
        Validated RenderContext
    """
    return RenderContext(
        name=resolve_effective_name(names),
        now=format_timestamp(now),
        server_info=server_info,
        servlet_name=servlet_name,
        method=request.method,
        request_uri=request.url.path,
    )
