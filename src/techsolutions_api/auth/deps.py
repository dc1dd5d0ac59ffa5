"""
techsolutions_api.auth.deps

FastAPI dependencies for authentication.

Responsibilities:
- Expose the app's immutable `JwtConfig` to routes.
- Convert a bearer token into a typed `Principal`, or fail with 401 before
  the route body runs.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from techsolutions_api.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from techsolutions_api.auth.models import Principal
from techsolutions_api.errors import AuthenticationError
from techsolutions_api.observability.logging import get_logger

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def jwt_config(request: Request) -> JwtConfig:
    # Built once in `api.app.create_app` from Settings.
    return request.app.state.jwt_config  # type: ignore[attr-defined]


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    cfg: JwtConfig = Depends(jwt_config),
) -> Principal:
    if creds is None or not creds.credentials:
        raise AuthenticationError("Missing bearer token")

    try:
        claims = decode_and_validate(cfg=cfg, token=creds.credentials)
    except JwtValidationError as e:
        log.info("token_rejected", reason=str(e))
        raise AuthenticationError("Invalid or expired token") from e

    return Principal.from_claims(claims)


# --- Module Notes -----------------------------------------------------------
# The rejection reason is logged for operators but not returned to the client.
