"""
Shows Review — Application Package Initializer
===============================================

What: Marks the `showsreview` directory as a Python package.
Who:  Used by uvicorn (`showsreview.main:app`), pytest, and the console script.

Architecture Note:

    ┌─────────────────────────────────────┐
    │        Dispatcher (routing)         │  ← (method, path) → page handler
    ├─────────────────────────────────────┤
    │     Page Handlers (routes/pages)    │  ← request → ViewDescriptor
    ├─────────────────────────────────────┤
    │      Schemas (schemas/view.py)      │  ← ViewDescriptor, PageContext
    ├─────────────────────────────────────┤
    │     Renderer (Jinja2 templates)     │  ← ViewDescriptor → HTML
    └─────────────────────────────────────┘

    Page handlers never touch the response; the renderer never decides
    which page to show.
"""

__version__ = "1.0.0"
