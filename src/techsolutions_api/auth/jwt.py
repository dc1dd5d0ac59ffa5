"""
techsolutions_api.auth.jwt

JWT issuing and validation.

Responsibilities:
- Issue HS256 access tokens carrying user id, email, role and a unique `jti`.
- Validate tokens strictly: fixed algorithm, issuer, audience, required
  claims and expiry with zero leeway.

Expiry boundary: a token is valid while `now < exp`; at `now == exp` it is
rejected. `now` is injectable on both sides so the boundary is testable, and
it is the only clock consulted: a token whose `iat` lies after `now` is
rejected too.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

# Only HMAC-SHA256 is ever accepted; the header's "alg" cannot widen this.
ALGORITHM = "HS256"

_REQUIRED_CLAIMS = ["sub", "email", "role", "jti", "iss", "aud", "iat", "exp"]


@dataclass(frozen=True, slots=True)
class JwtConfig:
    secret: str
    issuer: str
    audience: str
    ttl_minutes: int


@dataclass(frozen=True, slots=True)
class TokenClaims:
    user_id: int
    email: str
    role: str
    token_id: str
    expires_at: datetime


class JwtValidationError(Exception):
    pass


def issue_token(
    *,
    cfg: JwtConfig,
    subject_id: int,
    email: str,
    role: str,
    now: datetime | None = None,
) -> str:
    issued_at = int((now or datetime.now(tz=UTC)).timestamp())
    payload: dict[str, Any] = {
        "sub": str(subject_id),
        "email": email,
        "role": role,
        "jti": uuid.uuid4().hex,
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "iat": issued_at,
        "exp": issued_at + int(timedelta(minutes=cfg.ttl_minutes).total_seconds()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=ALGORITHM)


def decode_and_validate(
    *,
    cfg: JwtConfig,
    token: str,
    now: datetime | None = None,
) -> TokenClaims:
    try:
        # Signature, iss and aud are checked by PyJWT. Time claims are checked
        # below against the caller's clock only, never PyJWT's wall clock.
        payload = jwt.decode(
            token,
            cfg.secret,
            algorithms=[ALGORITHM],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": _REQUIRED_CLAIMS,
                "verify_exp": False,
                "verify_iat": False,
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e

    exp, iat = payload["exp"], payload["iat"]
    for name, value in (("exp", exp), ("iat", iat)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise JwtValidationError(f"Claim ({name}) must be an integer")
    current = (now or datetime.now(tz=UTC)).timestamp()
    if iat > current:
        raise JwtValidationError("The token is not yet valid (iat)")
    if current >= exp:
        raise JwtValidationError("Signature has expired")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise JwtValidationError("Invalid subject") from e

    return TokenClaims(
        user_id=user_id,
        email=str(payload["email"]),
        role=str(payload["role"]),
        token_id=str(payload["jti"]),
        expires_at=datetime.fromtimestamp(exp, tz=UTC),
    )


# --- Module Notes -----------------------------------------------------------
# Tokens are stateless: nothing is persisted at issue time and there is no
# revocation list. `TokenClaims.token_id` is what a deny-list would key on.
