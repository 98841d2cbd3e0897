"""
Shows Review — Renderer Tests
==============================

What:  ViewDescriptor → HTML, and template failures → TemplateRenderError.
"""

import pytest

from showsreview.exceptions import TemplateRenderError
from showsreview.rendering import Renderer
from showsreview.routes.pages import render_movies
from showsreview.schemas.view import PageContext, ViewDescriptor


@pytest.fixture
def templates_dir(tmp_path):
    root = tmp_path / "templates"
    root.mkdir()
    (root / "plain.html").write_text("<h1>{{ title }}</h1><p>{{ currentPage }}</p>")
    (root / "broken.html").write_text("{% if %}")
    return root


class TestRenderer:

    def test_render_descriptor(self, templates_dir, make_request):
        renderer = Renderer(str(templates_dir))
        descriptor = ViewDescriptor(
            template_name="plain",
            context=PageContext(title="Movies - Shows Review", currentPage="movies"),
        )

        response = renderer.render(make_request(), descriptor)

        assert response.status_code == 200
        assert response.body.decode() == "<h1>Movies - Shows Review</h1><p>movies</p>"

    def test_render_is_deterministic(self, templates_dir, make_request):
        renderer = Renderer(str(templates_dir))
        descriptor = ViewDescriptor(template_name="plain", context=PageContext(title="Home"))

        first = renderer.render(make_request(), descriptor)
        second = renderer.render(make_request(), descriptor)

        assert first.body == second.body

    def test_custom_status_code(self, templates_dir, make_request):
        renderer = Renderer(str(templates_dir))
        response = renderer.render_template(make_request(), "plain", {"title": "x"}, status_code=404)
        assert response.status_code == 404

    def test_missing_template(self, templates_dir, make_request):
        renderer = Renderer(str(templates_dir))
        descriptor = ViewDescriptor(template_name="nowhere", context=PageContext(title="x"))

        with pytest.raises(TemplateRenderError) as exc_info:
            renderer.render(make_request(), descriptor)

        assert exc_info.value.template_name == "nowhere"
        assert exc_info.value.context["templates_dir"] == str(templates_dir)

    def test_syntax_error_in_template(self, templates_dir, make_request):
        renderer = Renderer(str(templates_dir))

        with pytest.raises(TemplateRenderError, match="broken"):
            renderer.render_template(make_request(), "broken", {})

    def test_bundled_templates_render_pages(self, make_request):
        from showsreview.config import settings

        renderer = Renderer(settings.templates_dir)
        request = make_request("GET", "/movies")

        html = renderer.render(request, render_movies(request)).body.decode()

        assert "<title>Movies - Shows Review</title>" in html
        assert 'href="/movies" aria-current="page"' in html
