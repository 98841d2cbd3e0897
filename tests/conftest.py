"""
Shows Review — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── make_request: Builds a bare Starlette Request for a method + path
    ├── dispatcher: Fresh Dispatcher with the site's pages registered
    ├── static_dir: Temporary static directory with a couple of files
    ├── make_client: Async HTTP client factory for custom app configurations
    └── test_client: HTTPX AsyncClient bound to the default application
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

from contextlib import asynccontextmanager  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from starlette.requests import Request  # noqa: E402

from showsreview.config import Settings  # noqa: E402
from showsreview.main import create_app  # noqa: E402
from showsreview.routes.pages import build_dispatcher  # noqa: E402


def build_request(method: str = "GET", path: str = "/") -> Request:
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "root_path": "",
        "scheme": "http",
        "query_string": b"",
        "headers": [],
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 12345),
    }
    return Request(scope)


@pytest.fixture
def make_request():
    """Factory for Starlette Requests that never touch the network."""
    return build_request


@pytest.fixture
def dispatcher():
    return build_dispatcher()


@pytest.fixture
def static_dir(tmp_path):
    """
    Temporary static directory.

    Contains robots.txt, css/site.css, and a file named `movies` that must
    never shadow the /movies page.
    """
    root = tmp_path / "public"
    (root / "css").mkdir(parents=True)
    (root / "robots.txt").write_text("User-agent: *\nDisallow:\n")
    (root / "css" / "site.css").write_text("body { color: black; }\n")
    (root / "movies").write_text("static file, not the movies page\n")
    return root


@pytest.fixture
def make_client():
    """
    Async client factory for apps built with a custom dispatcher or settings.

    Usage:
        async with make_client(dispatcher=d) as client:
            response = await client.get("/")
    """

    @asynccontextmanager
    async def factory(dispatcher=None, **settings_overrides):
        app_settings = Settings(**settings_overrides) if settings_overrides else None
        app = create_app(dispatcher=dispatcher, app_settings=app_settings)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    return factory


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient for the default application.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
