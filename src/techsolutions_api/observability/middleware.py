"""
techsolutions_api.observability.middleware

Per-request logging context.

Responsibilities:
- Accept or mint an `x-request-id` and echo it on the response.
- Bind request id, method and path into structlog contextvars.
- Log one access event per request with status and latency, including
  requests that end in an unhandled exception.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from techsolutions_api.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        # The 500 handler runs outside this middleware and reads it from here.
        request.state.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        except Exception:
            log.error(
                "request_failed",
                status_code=500,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        finally:
            # Context must not bleed into the next request served by this task.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response
