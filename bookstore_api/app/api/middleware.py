"""Trailing-slash middleware.

Clients reach the same resource with or without a trailing slash
(``/books`` and ``/books/``, ``/books/1`` and ``/books/1/``).  Rather
than answering the slashed form with a redirect, the path is
normalised before routing.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class TrailingSlashMiddleware(BaseHTTPMiddleware):
    """Strip trailing slashes from the request path; ``/`` is kept."""

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)
