"""
Exception handlers that render every error as a plain text message.

Endpoints raise ``HTTPException`` with a human readable ``detail``; the
handler below writes that detail as the ``text/plain`` response body.
Request validation errors (malformed JSON, wrong field types, path
parameters that are not integers) are reported as ``400 Bad Request``
instead of FastAPI's default ``422``.
"""

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Join validation errors into ``"<location>: <message>"`` items."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    message = format_validation_errors(exc.errors())
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
