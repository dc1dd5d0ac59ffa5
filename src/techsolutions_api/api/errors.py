"""
techsolutions_api.api.errors

Exception handlers that render every failure as the JSON error envelope.

Responsibilities:
- `ApiError` subclasses -> their own status code and message.
- FastAPI request validation -> 400 with field-level messages.
- Starlette HTTP errors (unknown route, wrong method) -> same envelope.
- Anything unclassified -> logged with traceback, generic 500.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from techsolutions_api.api.schemas import ErrorEnvelope
from techsolutions_api.errors import ApiError, AuthenticationError
from techsolutions_api.observability.logging import get_logger
from techsolutions_api.settings import Settings

log = get_logger(__name__)


def _render(
    status_code: int,
    body: ErrorEnvelope,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )


def _field_errors(exc: RequestValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        # Drop the "body"/"query"/"path" prefix; clients care about the field.
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        messages.append(f"{field}: {err['msg']}" if field else str(err["msg"]))
    return messages


def register_exception_handlers(app: FastAPI, *, settings: Settings) -> None:
    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError) -> JSONResponse:
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        error = exc.detail if settings.expose_error_details else None
        return _render(
            exc.status_code,
            ErrorEnvelope(message=exc.message, errors=exc.errors, error=error),
            headers,
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _render(
            HTTP_400_BAD_REQUEST,
            ErrorEnvelope(message="Invalid data", errors=_field_errors(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _render(
            exc.status_code,
            ErrorEnvelope(message=str(exc.detail)),
            getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", None)
        log.error("unhandled_exception", request_id=request_id, exc_info=exc)
        return _render(
            HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorEnvelope(message="Internal server error"),
            {"x-request-id": request_id} if request_id else None,
        )


# --- Module Notes -----------------------------------------------------------
# `ErrorEnvelope.error` carries the operator diagnostic and is omitted in prod.
