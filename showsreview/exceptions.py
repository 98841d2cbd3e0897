"""
Shows Review — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the two failure outcomes a page
       request can have.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return HTML/plain-text error responses with the right status code.
Who:   Raised by the Dispatcher and the Renderer; caught by global handlers.

Exception Hierarchy:
    ShowsReviewError (base)           → 500 Internal Server Error
    ├── RouteNotFoundError            → 404 Not Found
    └── TemplateRenderError           → 500 Internal Server Error

RouteNotFoundError is a terminal outcome of dispatch, not a crash: the
handler answers 404 and the process keeps serving.
"""

from typing import Any, Dict, Optional


class ShowsReviewError(Exception):
    """
    Base exception for all Shows Review application errors.

    Attributes:
        message:  User-facing error description (safe to put in a response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RouteNotFoundError(ShowsReviewError):
    """
    Raised when no route registration matches the request's method and path.

    HTTP:    404 Not Found
    Message: mirrors the classic "Cannot GET /path" wording.
    """

    def __init__(
        self,
        method: str,
        path: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["method"] = method
        ctx["path"] = path
        super().__init__(message=f"Cannot {method} {path}", context=ctx)
        self.method = method
        self.path = path


class TemplateRenderError(ShowsReviewError):
    """
    Raised when the renderer cannot resolve or render a named template.

    HTTP:    500 Internal Server Error

    Neither the Dispatcher nor the page handlers look at the template
    directory, so this only ever surfaces from the rendering step. The
    template name and the underlying Jinja2 error are kept in `context`
    for the server log; the client sees a generic message.
    """

    def __init__(
        self,
        template_name: str,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["template_name"] = template_name
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Template '{template_name}' could not be rendered",
            context=ctx,
        )
        self.template_name = template_name
