"""
Shows Review — FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() wires the Dispatcher, the Renderer and
       the static assets into one app and returns it.
Who:   Called by uvicorn (uvicorn showsreview.main:app) and by the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────────────────────────────┐                  │
    │  │ /{path} (any method)          │                  │
    │  │   → Dispatcher                │                  │
    │  │   match  → handler → Renderer │                  │
    │  │   miss   → static file or 404 │                  │
    │  └───────────────────────────────┘                  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ RouteNotFound→404 │ TemplateRender→500       │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from showsreview import __version__
from showsreview.assets import StaticAssets
from showsreview.config import Settings, settings
from showsreview.dispatcher import Dispatcher
from showsreview.exceptions import (
    RouteNotFoundError,
    ShowsReviewError,
    TemplateRenderError,
)
from showsreview.middleware.logging import RequestLoggingMiddleware
from showsreview.middleware.request_id import RequestIDMiddleware, request_id_var
from showsreview.rendering import Renderer
from showsreview.routes.pages import SITE_NAME, build_dispatcher

logger = logging.getLogger(__name__)

NOT_FOUND_TEMPLATE = "404"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # showsreview.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Warn about missing template/static directories
        3. Announce the listening address
    Shutdown:
        Log only; nothing is held open.
    """
    cfg: Settings = app.state.settings
    setup_logging(cfg.log_level)

    templates_dir = Path(app.state.renderer.templates_dir)
    if not templates_dir.is_dir():
        logger.warning("Templates directory not found: %s (pages will return 500)", templates_dir)
    static_dir = Path(app.state.static_assets.directory)
    if not static_dir.is_dir():
        logger.warning("Static directory not found: %s", static_dir)

    logger.info(
        "%d page routes: %s",
        len(app.state.dispatcher),
        ", ".join(f"{r.method} {r.path}" for r in app.state.dispatcher.routes),
    )
    logger.info("Server is running on %s", cfg.base_url)

    yield

    logger.info("Shows Review shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

        RouteNotFoundError   → 404 (404 template, plain text if unavailable)
        TemplateRenderError  → 500 (generic body, details logged)
        ShowsReviewError     → 500
    """

    @app.exception_handler(RouteNotFoundError)
    async def handle_route_not_found(request: Request, exc: RouteNotFoundError):
        """No registration and no static file: the defined not-found outcome."""
        renderer: Renderer = request.app.state.renderer
        try:
            return renderer.render_template(
                request,
                NOT_FOUND_TEMPLATE,
                {"title": f"Page Not Found - {SITE_NAME}", "message": exc.message},
                status_code=404,
            )
        except TemplateRenderError as render_exc:
            logger.debug("404 template unavailable: %s", render_exc.context)
            return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(TemplateRenderError)
    async def handle_template_error(request: Request, exc: TemplateRenderError):
        """Renderer could not produce a body; details stay server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Template render error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse("Internal Server Error", status_code=500)

    @app.exception_handler(ShowsReviewError)
    async def handle_app_error(request: Request, exc: ShowsReviewError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse("Internal Server Error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Page Endpoint
# ══════════════════════════════════════════════════════════════════════════

async def page_endpoint(request: Request) -> Response:
    """
    Dispatch a request to its page handler and render the result.

    Mounted without a method restriction: every method reaches the
    Dispatcher, so unregistered combinations end as 404, never 405.

    On a Dispatcher miss, GET/HEAD requests get one more chance from the
    static directory before the RouteNotFoundError propagates.
    """
    dispatcher: Dispatcher = request.app.state.dispatcher
    try:
        descriptor = dispatcher.dispatch(request)
    except RouteNotFoundError:
        asset = await request.app.state.static_assets.lookup(request)
        if asset is not None:
            return asset
        raise

    return request.app.state.renderer.render(request, descriptor)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    dispatcher: Optional[Dispatcher] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        dispatcher:    Route table to serve; defaults to the site's pages.
                       The app takes ownership of it.
        app_settings:  Settings to use instead of the module singleton.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    cfg = app_settings or settings

    app = FastAPI(
        title=SITE_NAME,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.dispatcher = dispatcher if dispatcher is not None else build_dispatcher()
    app.state.renderer = Renderer(cfg.templates_dir)
    app.state.static_assets = StaticAssets(cfg.static_dir)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # Plain Starlette route with methods=None accepts every HTTP method
    app.router.add_route("/{full_path:path}", page_endpoint, include_in_schema=False)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
