"""
techsolutions_api.errors

Application error taxonomy.

Responsibilities:
- Classify every failure the API can surface into one of four kinds.
- Carry the HTTP status and the client-facing message with the error itself.

The API layer (`api.errors`) renders these into the JSON envelope; services
raise them and never return sentinel values for failures.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ApiError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: str | None = None,
        *,
        errors: list[str] | None = None,
        detail: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        # Field-level messages (validation only).
        self.errors = errors
        # Operator diagnostic; only rendered outside prod.
        self.detail = detail
        super().__init__(self.message)


class InputValidationError(ApiError):
    status_code = HTTP_400_BAD_REQUEST
    default_message = "Invalid data"


class AuthenticationError(ApiError):
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class NotFoundError(ApiError):
    status_code = HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(ApiError):
    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


# --- Module Notes -----------------------------------------------------------
# Authentication failures for login deliberately share one message; see
# `services.auth_service.INVALID_CREDENTIALS`.
