"""
Shows Review — View Schemas
============================

What:  Pydantic models describing what a page handler hands to the renderer.
How:   A ViewDescriptor pairs a template name with a typed PageContext.
       `template_context()` flattens it into the plain mapping Jinja2 sees.
Who:   Built by page handlers (routes/pages.py), consumed by the Renderer.
When:  Constructed fresh for every request; never stored.

Template context keys:
    title        Display string for <title> and the page heading
    currentPage  One of NavPage's values; used only to highlight the
                 matching navigation link
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class NavPage(str, Enum):
    """Closed set of navigation identifiers."""

    HOME = "home"
    MOVIES = "movies"
    TV_SHOWS = "tv-shows"


class PageContext(BaseModel):
    """
    What:  Values used to populate a page template.
    Who:   Embedded in every ViewDescriptor.

    `current_page` is exposed to templates under the `currentPage` key.
    Anything outside NavPage is rejected at construction time.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    title: str = Field(min_length=1, description="Page title shown in <title> and <h1>")
    current_page: Optional[NavPage] = Field(
        default=None,
        alias="currentPage",
        description="Navigation entry to highlight",
    )


class ViewDescriptor(BaseModel):
    """
    What:  Template name + context passed to the rendering collaborator.
    Who:   Returned by every page handler.

    The template name maps to `<template_name>.html` in the templates
    directory; whether that file exists is only discovered at render time.
    """

    model_config = ConfigDict(frozen=True)

    template_name: str = Field(min_length=1, description="Template to render, without extension")
    context: PageContext

    def template_context(self) -> Dict[str, Any]:
        """Plain mapping handed to Jinja2 (`title`, `currentPage`)."""
        return self.context.model_dump(by_alias=True, exclude_none=True)
