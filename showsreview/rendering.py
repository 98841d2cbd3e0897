"""
Shows Review — Template Renderer
=================================

What:  Turns a ViewDescriptor into an HTML response.
How:   Wraps Starlette's Jinja2Templates; a template name `movies` resolves to
       `movies.html` in the configured templates directory.
Who:   Owned by the FastAPI app (`app.state.renderer`), called from the page
       endpoint after the Dispatcher has produced a descriptor.

Failure:
    Missing templates and Jinja2 errors surface as TemplateRenderError,
    which the global handler in main.py turns into HTTP 500.
"""

import logging
from typing import Any, Dict, Optional

from jinja2 import TemplateError
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.templating import Jinja2Templates

from showsreview.exceptions import TemplateRenderError
from showsreview.schemas.view import ViewDescriptor

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"


class Renderer:
    """Rendering collaborator backed by a Jinja2 template directory."""

    def __init__(self, templates_dir: str):
        self.templates_dir = templates_dir
        self.templates = Jinja2Templates(directory=templates_dir)

    def render(
        self,
        request: Request,
        descriptor: ViewDescriptor,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render `descriptor` into a response body."""
        return self.render_template(
            request,
            descriptor.template_name,
            descriptor.template_context(),
            status_code=status_code,
        )

    def render_template(
        self,
        request: Request,
        template_name: str,
        context: Optional[Dict[str, Any]] = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """
        Render a named template with a plain context mapping.

        Raises:
            TemplateRenderError: Template missing or failed to render.
        """
        filename = template_name + TEMPLATE_SUFFIX
        try:
            return self.templates.TemplateResponse(
                request,
                filename,
                context or {},
                status_code=status_code,
            )
        except TemplateError as exc:
            raise TemplateRenderError(
                template_name=template_name,
                reason=f"{type(exc).__name__}: {exc}",
                context={"templates_dir": self.templates_dir},
            ) from exc
