"""
Shows Review — Static Asset Lookup
===================================

What:  Serves files from the static directory for paths the Dispatcher
       did not match.
How:   Delegates to Starlette's StaticFiles, which resolves the file,
       refuses paths escaping the directory and sets ETag/Last-Modified.
       A miss returns None so the caller can fall through to 404.
Who:   Called by the page endpoint in main.py, only after dispatch failed.

    /css/style.css  →  <static_dir>/css/style.css
"""

import logging
import os
from typing import Optional

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

logger = logging.getLogger(__name__)

STATIC_METHODS = {"GET", "HEAD"}


class StaticAssets:
    """Static-asset collaborator rooted at a single directory."""

    def __init__(self, directory: str):
        self.directory = directory
        self.files = StaticFiles(directory=directory, check_dir=False)

    async def lookup(self, request: Request) -> Optional[Response]:
        """Return a file response for `request`, or None if nothing matches."""
        if request.method not in STATIC_METHODS:
            return None

        relative = os.path.normpath(request.url.path.lstrip("/"))
        if relative in (".", ""):
            return None

        try:
            return await self.files.get_response(relative, request.scope)
        except HTTPException as exc:
            logger.debug("No static file for %s (%d)", request.url.path, exc.status_code)
            return None
