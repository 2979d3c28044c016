"""Greeting page route."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from hello_webapp.config import Settings, get_settings
from hello_webapp.dependencies import get_server_info, get_servlet_name
from hello_webapp.services.greeting_service import build_render_context, collect_name_values
from hello_webapp.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.api_route("/hello", methods=["GET", "POST"], response_class=HTMLResponse)
async def hello(
    request: Request,
    settings: Settings = Depends(get_settings),
    server_info: str = Depends(get_server_info),
    servlet_name: str = Depends(get_servlet_name),
):
    """Render the greeting page.

    GET and POST share this endpoint and produce the same document. The
    optional ``name`` parameter is read from the query string and, for POST,
    from a form body; the first value wins and a blank value greets ``World``.
    """
    names = await collect_name_values(request)
    context = build_render_context(request, names, server_info, servlet_name)
    return TemplateRenderer.render_hello(request, context, settings)
