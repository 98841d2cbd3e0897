"""View schemas shared by the page handlers and the renderer."""

from showsreview.schemas.view import NavPage, PageContext, ViewDescriptor

__all__ = ["NavPage", "PageContext", "ViewDescriptor"]
