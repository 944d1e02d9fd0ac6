"""API middleware for authentication."""

import logging
import secrets
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Paths that don't require authentication
PUBLIC_PATHS = {"/api/v1/health", "/docs", "/openapi.json", "/redoc"}


async def api_key_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Middleware to validate API key authentication.

    Checks the X-API-Key header against the app's configured key. When no
    key is configured the API is open (it binds to loopback by default).
    Public paths are exempt from authentication.
    """
    path = request.url.path

    # Allow public paths without authentication
    if path in PUBLIC_PATHS or path.startswith("/docs") or path.startswith("/redoc"):
        response = await call_next(request)
        return response

    expected = request.app.state.api_key
    if not expected:
        response = await call_next(request)
        return response

    # Check API key header
    api_key = request.headers.get("X-API-Key")

    if not api_key:
        return JSONResponse(
            status_code=401,
            content={"detail": "Missing X-API-Key header"},
        )

    if not secrets.compare_digest(api_key, expected):
        logger.warning(f"Rejected request to {path}: invalid API key")
        return JSONResponse(
            status_code=401,
            content={"detail": "Invalid API key"},
        )

    response = await call_next(request)
    return response
