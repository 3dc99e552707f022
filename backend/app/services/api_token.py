"""Optional bearer token for securing the API.

Set MINDMAP_API_TOKEN to require ``Authorization: Bearer <token>`` on all
/api/* requests except /api/health. Leave it unset for single-user use bound
to 127.0.0.1.

Auth can also be explicitly disabled via MINDMAP_NO_AUTH=true.
"""

from __future__ import annotations

import os
import secrets


def get_api_token() -> str | None:
    """Return the configured API token, or None when auth is disabled."""
    if os.environ.get("MINDMAP_NO_AUTH", "").lower() == "true":
        return None
    return os.environ.get("MINDMAP_API_TOKEN") or None


def verify_api_token(authorization: str) -> bool:
    """Check an Authorization header value using constant-time comparison."""
    expected = get_api_token()
    if expected is None:
        return True  # Auth disabled
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return False
    return secrets.compare_digest(token.strip(), expected)
