"""Translation of failures into the structured JSON error body."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from guestbook.schemas.entry import ErrorBody

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Error"
    body = ErrorBody(
        timestamp=datetime.now(timezone.utc).isoformat(),
        status=status_code,
        error=reason,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(body.model_dump(), status_code=status_code)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return error_response(request, exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return error_response(request, 400, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s -> 500: unhandled %s", request.method, request.url.path, type(exc).__name__, exc_info=exc)
    return error_response(request, 500, "Unexpected server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
