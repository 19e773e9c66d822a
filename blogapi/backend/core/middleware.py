"""
Request Context Middleware.

Tags every request with an id and the calling frontend, binds both into
structlog contextvars for the duration of the request, and reports the
id and elapsed time back in response headers.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from blogapi.backend.core.logging import VALID_SOURCES, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
FRONTEND_HEADER = "X-Frontend-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


def _frontend(request: Request) -> str:
    """Frontend named by the X-Frontend-ID header, or 'unknown'."""
    frontend = request.headers.get(FRONTEND_HEADER, "unknown").lower()
    return frontend if frontend in VALID_SOURCES else "unknown"


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Per-request id, frontend and timing.

    Sets on request.state:
        request_id  - from X-Request-ID, or a new UUID4
        frontend    - web, cli, api, internal or unknown

    The CLI client sends X-Frontend-ID: cli, so its requests are
    distinguishable in the log file from browser or curl traffic.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        frontend = _frontend(request)

        request.state.request_id = request_id
        request.state.frontend = frontend
        started = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            frontend=frontend,
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed with exception",
                extra={"duration_ms": _elapsed_ms(started), "error_type": type(exc).__name__},
            )
            raise
        else:
            duration_ms = _elapsed_ms(started)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms}ms"

            logger.info(
                "Request handled",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()
