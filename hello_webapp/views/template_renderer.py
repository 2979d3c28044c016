"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from markupsafe import Markup

from hello_webapp.config import Settings
from hello_webapp.exceptions import TemplateRenderException
from hello_webapp.logging_config import get_logger, log_with_context
from hello_webapp.models.greeting import RenderContext

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

HTML_CONTENT_TYPE = "text/html;charset=UTF-8"


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for all HTML views."""

    @staticmethod
    def render_hello(request: Request, context: RenderContext, settings: Settings) -> HTMLResponse:
        """Render the greeting page.

        Args:
            request: FastAPI request object
            context: Values for this page
            settings: Settings instance (must be provided by router via Depends)

        Returns:
            HTMLResponse with the rendered greeting page

        Raises:
            TemplateRenderException: If the template is missing or fails to render
        """
        values: dict = context.model_dump()
        if not settings.escape_html:
            # Markup bypasses Jinja2 autoescaping
            values = {key: Markup(value) for key, value in values.items()}

        return TemplateRenderer._render(request, "hello.html", values)

    @staticmethod
    def _render(request: Request, template_name: str, values: dict) -> HTMLResponse:
        try:
            return templates.TemplateResponse(
                request,
                template_name,
                values,
                media_type=HTML_CONTENT_TYPE,
            )
        except TemplateError as e:
            log_with_context(
                logger,
                "error",
                "Failed to render template",
                template=template_name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_error",
            )
            raise TemplateRenderException(
                f"Failed to render {template_name}",
                details={"template": template_name},
            ) from e
