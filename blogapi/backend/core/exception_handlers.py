"""
Exception Handlers.

Turn exceptions raised while handling a request into plain-text
responses. Error bodies are the bare message (for example
``The blog with the given ID not found!``); clients tell errors apart
by status code alone.

    ApplicationError subclasses   -> status from EXCEPTION_STATUS_MAP
    HTTPException                 -> its own status, detail as text
    RequestValidationError        -> 400, body could not be decoded
    anything else                 -> 500, details only in the log
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogapi.backend.core.exceptions import (
    ApplicationError,
    NotFoundError,
    ValidationError,
)
from blogapi.backend.core.logging import get_logger

logger = get_logger(__name__)

EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
}

INVALID_BODY_MESSAGE = "Request body is not valid JSON"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def _get_request_id(request: Request) -> str | None:
    """Request id set by the middleware, else the incoming header."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _request_fields(request: Request, **fields: Any) -> dict[str, Any]:
    return {
        "path": request.url.path,
        "method": request.method,
        "request_id": _get_request_id(request),
        **fields,
    }


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> PlainTextResponse:
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    fields = _request_fields(request, code=exc.code, message=exc.message, status=status_code)

    if status_code >= 500:
        logger.error("Server error", extra=fields)
    else:
        logger.warning("Client error", extra=fields)

    return PlainTextResponse(exc.message, status_code=status_code)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> PlainTextResponse:
    """Routing errors (unknown path, wrong method) as plain text."""
    logger.info("HTTP error", extra=_request_fields(request, status=exc.status_code))
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> PlainTextResponse:
    """
    Reject a body FastAPI could not decode.

    Blog endpoints accept any decoded body and validate it in the
    service, so this only fires for malformed JSON.
    """
    error_types = [err.get("type", "unknown") for err in exc.errors()]
    logger.warning("Request body rejected", extra=_request_fields(request, error_types=error_types))

    return PlainTextResponse(INVALID_BODY_MESSAGE, status_code=400)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> PlainTextResponse:
    logger.exception(
        "Unhandled exception",
        extra=_request_fields(request, exception_type=type(exc).__name__),
    )
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler above to the app."""
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
