"""
Shows Review — Page Handlers
=============================

What:  One handler per navigation page; each maps a request to a ViewDescriptor.
How:   Handlers embed literal titles and navigation ids. They never read the
       request, never touch the response, and perform no I/O.
Who:   Registered on the Dispatcher by `register_pages()`.

    GET /          → home      "Home - Shows Review"
    GET /movies    → movies    "Movies - Shows Review"
    GET /tv-shows  → tv-shows  "TV Shows - Shows Review"
"""

from starlette.requests import Request

from showsreview.dispatcher import Dispatcher
from showsreview.schemas.view import NavPage, PageContext, ViewDescriptor

SITE_NAME = "Shows Review"


def _page(template_name: str, heading: str, nav: NavPage) -> ViewDescriptor:
    return ViewDescriptor(
        template_name=template_name,
        context=PageContext(title=f"{heading} - {SITE_NAME}", current_page=nav),
    )


def render_home(request: Request) -> ViewDescriptor:
    """Home page handler."""
    return _page("home", "Home", NavPage.HOME)


def render_movies(request: Request) -> ViewDescriptor:
    """Movies page handler."""
    return _page("movies", "Movies", NavPage.MOVIES)


def render_tv_shows(request: Request) -> ViewDescriptor:
    """TV Shows page handler."""
    return _page("tv-shows", "TV Shows", NavPage.TV_SHOWS)


def register_pages(dispatcher: Dispatcher) -> Dispatcher:
    """Register the navigation pages, in order, on `dispatcher`."""
    dispatcher.add("GET", "/", render_home, name="home")
    dispatcher.add("GET", "/movies", render_movies, name="movies")
    dispatcher.add("GET", "/tv-shows", render_tv_shows, name="tv-shows")
    return dispatcher


def build_dispatcher() -> Dispatcher:
    """Fresh Dispatcher with every page route registered."""
    return register_pages(Dispatcher())
