"""
Shows Review — Request Dispatcher
==================================

What:  Maps (HTTP method, path pattern) to a page handler.
How:   Registrations are kept in an ordered list; `match()` walks it and
       returns the first registration whose method and compiled pattern
       both match. No match means RouteNotFoundError, never a crash.
Who:   Built by `routes.pages.build_dispatcher()`, owned by the FastAPI app
       (`app.state.dispatcher`) and called from its page endpoint.

Path patterns:
    "/movies"          literal, matches only "/movies"
    "/shows/{slug}"    parameter segment, matches "/shows/dune" → {"slug": "dune"}

Ordering:
    First registration wins. The shipped routes are all literal and cannot
    overlap, but later additions such as "/movies/new" before
    "/movies/{slug}" rely on it.

    dispatcher = Dispatcher()
    dispatcher.add("GET", "/", render_home)

    @dispatcher.get("/movies")
    def render_movies(request): ...
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from starlette.requests import Request

from showsreview.exceptions import RouteNotFoundError
from showsreview.schemas.view import ViewDescriptor

logger = logging.getLogger(__name__)

PageHandler = Callable[[Request], ViewDescriptor]

_PARAM_SEGMENT = re.compile(r"^\{([A-Za-z_][A-Za-z0-9_]*)\}$")


def compile_path(path: str) -> Pattern[str]:
    """
    Compile a path pattern into an anchored regex.

    Literal segments are escaped; `{name}` segments become named groups
    matching one non-empty segment.
    """
    if not path.startswith("/"):
        raise ValueError(f"Route path must start with '/': {path!r}")

    parts = []
    for segment in path.split("/")[1:]:
        param = _PARAM_SEGMENT.match(segment)
        if param:
            parts.append(f"(?P<{param.group(1)}>[^/]+)")
        else:
            parts.append(re.escape(segment))
    return re.compile("^/" + "/".join(parts) + "$")


@dataclass(frozen=True)
class RouteRegistration:
    """A single (method, path pattern, handler) entry."""

    method: str
    path: str
    handler: PageHandler
    name: Optional[str] = None
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "pattern", compile_path(self.path))

    def match_path(self, path: str) -> Optional[Dict[str, str]]:
        found = self.pattern.match(path)
        return found.groupdict() if found else None


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful lookup."""

    route: RouteRegistration
    params: Dict[str, str]


class Dispatcher:
    """
    Ordered route table for page handlers.

    Dispatch is read-only: once routes are registered, any number of
    concurrent requests can call `match()`/`dispatch()` without
    coordination.
    """

    def __init__(self) -> None:
        self._routes: List[RouteRegistration] = []

    def add(
        self,
        method: str,
        path: str,
        handler: PageHandler,
        name: Optional[str] = None,
    ) -> RouteRegistration:
        """Append a registration for exactly one method."""
        route = RouteRegistration(
            method=method,
            path=path,
            handler=handler,
            name=name or getattr(handler, "__name__", None),
        )
        self._routes.append(route)
        logger.debug("Registered route %s %s → %s", route.method, route.path, route.name)
        return route

    def get(self, path: str, name: Optional[str] = None) -> Callable[[PageHandler], PageHandler]:
        """Decorator form of `add("GET", path, handler)`."""

        def decorator(handler: PageHandler) -> PageHandler:
            self.add("GET", path, handler, name=name)
            return handler

        return decorator

    @property
    def routes(self) -> Tuple[RouteRegistration, ...]:
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def match(self, method: str, path: str) -> Optional[RouteMatch]:
        """
        Find the first registration matching method and path.

        HEAD requests fall back to the first matching GET registration
        when no HEAD registration matches.
        """
        method = method.upper()
        accepted = {method, "GET"} if method == "HEAD" else {method}

        head_fallback: Optional[RouteMatch] = None
        for route in self._routes:
            if route.method not in accepted:
                continue
            params = route.match_path(path)
            if params is None:
                continue
            if route.method == method:
                return RouteMatch(route=route, params=params)
            if head_fallback is None:
                head_fallback = RouteMatch(route=route, params=params)
        return head_fallback

    def dispatch(self, request: Request) -> ViewDescriptor:
        """
        Run the handler registered for this request.

        Raises:
            RouteNotFoundError: No registration matches method + path.
        """
        method = request.method
        path = request.url.path
        found = self.match(method, path)
        if found is None:
            raise RouteNotFoundError(method=method, path=path)

        request.state.route_params = found.params
        return found.route.handler(request)
