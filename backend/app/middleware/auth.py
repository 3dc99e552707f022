"""Bearer token authentication middleware.

Checks the Authorization header on all /api/* paths except /api/health.
"""

from __future__ import annotations

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from app.services.api_token import get_api_token, verify_api_token

# Paths that don't require authentication
_PUBLIC_PATHS = {"/api/health"}


class TokenAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        if not path.startswith("/api/") or path in _PUBLIC_PATHS:
            return await call_next(request)

        # Skip auth if disabled
        if get_api_token() is None:
            return await call_next(request)

        if not verify_api_token(request.headers.get("Authorization", "")):
            return JSONResponse(
                status_code=401,
                content={"detail": "Invalid or missing API token"},
            )

        return await call_next(request)
