"""Exception handlers rendering the shared HTML error page."""
from __future__ import annotations

import logging
from typing import Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studentapp.core.security import apply_security_headers

logger = logging.getLogger(__name__)


def _render_error(
    request: Request,
    status_code: int,
    message: str,
    details: list[str] | None = None,
    headers: Mapping[str, str] | None = None,
):
    templates = getattr(getattr(request.app, "state", None), "templates", None)
    context = {"status_code": status_code, "message": message, "details": details or []}
    if templates is None:
        return HTMLResponse(f"<h1>{status_code}</h1>", status_code=status_code, headers=headers)
    return templates.TemplateResponse(request, "error.html", context, status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _render_error(request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = []
    for error in exc.errors():
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details.append(f"{field}: {error['msg']}")
    return _render_error(
        request,
        422,
        "Input validation failed",
        details,
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    response = _render_error(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
    )
    # ServerErrorMiddleware runs outside SecurityHeadersMiddleware
    settings = getattr(getattr(request.app, "state", None), "settings", None)
    enforce_hsts = bool(settings and settings.app_env == "prod")
    apply_security_headers(response.headers, enforce_hsts=enforce_hsts)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
