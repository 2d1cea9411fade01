"""Baseline security headers shared by the middleware and the error handlers."""
from __future__ import annotations

from typing import MutableMapping

from starlette.middleware.base import BaseHTTPMiddleware

CONTENT_SECURITY_POLICY = "default-src 'self'; style-src 'self' 'unsafe-inline'; form-action 'self'"


def apply_security_headers(headers: MutableMapping[str, str], *, enforce_hsts: bool) -> None:
    headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
    headers.setdefault("X-Frame-Options", "DENY")
    headers.setdefault("X-Content-Type-Options", "nosniff")
    headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
    if enforce_hsts:
        headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        apply_security_headers(response.headers, enforce_hsts=self._enforce_hsts)
        return response
