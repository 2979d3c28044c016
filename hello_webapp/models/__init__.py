"""Hello WebApp models"""

from hello_webapp.models.base_models import HealthResponse
from hello_webapp.models.greeting import RenderContext

__all__ = [
    "HealthResponse",
    "RenderContext",
]
