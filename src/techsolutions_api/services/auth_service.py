"""
techsolutions_api.services.auth_service

Login use case.

Responsibilities:
- Validate the credential pair before touching the store.
- Look up the active user by exact email and verify the bcrypt hash.
- Issue an access token and return the public identity view.

Login walks RECEIVED -> LOOKED_UP -> VERIFIED -> ISSUED; any failed check
ends in REJECTED. Unknown email, inactive user and wrong password are all
rejected with the same message after the same amount of bcrypt work.
"""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from techsolutions_api.auth.jwt import JwtConfig, issue_token
from techsolutions_api.auth.passwords import DUMMY_HASH, verify_password
from techsolutions_api.db.repositories.users import UserRepo
from techsolutions_api.errors import AuthenticationError, InputValidationError, InternalError
from techsolutions_api.observability.logging import get_logger

log = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class LoginStage(enum.StrEnum):
    received = "RECEIVED"
    looked_up = "LOOKED_UP"
    verified = "VERIFIED"
    issued = "ISSUED"
    rejected = "REJECTED"


@dataclass(frozen=True, slots=True)
class UserView:
    user_id: int
    email: str
    full_name: str | None
    role: str


@dataclass(frozen=True, slots=True)
class LoginResult:
    token: str
    user: UserView


class AuthService:
    def __init__(self, *, session: AsyncSession, jwt_config: JwtConfig) -> None:
        self._users = UserRepo(session)
        self._jwt = jwt_config

    async def login(self, *, email: str | None, password: str | None) -> LoginResult:
        stage = LoginStage.received
        errors: list[str] = []
        if not email or not email.strip():
            errors.append("email: field required")
        if not password:
            errors.append("password: field required")
        if errors:
            log.info("login_rejected", stage=stage, reason="invalid_input")
            raise InputValidationError(errors=errors)

        try:
            user = await self._users.get_active_by_email(email.strip())
        except SQLAlchemyError as e:
            log.error("login_store_error", stage=stage, exc_info=True)
            raise InternalError("Error while logging in", detail=str(e)) from e
        stage = LoginStage.looked_up

        # Run bcrypt even for unknown users so timing does not reveal which emails exist.
        stored_hash = user.password_hash if user is not None else DUMMY_HASH
        password_ok = await asyncio.to_thread(verify_password, password, stored_hash)
        if user is None or not password_ok:
            log.info("login_rejected", stage=stage, reason="invalid_credentials")
            raise AuthenticationError(INVALID_CREDENTIALS)
        stage = LoginStage.verified

        token = issue_token(cfg=self._jwt, subject_id=user.id, email=user.email, role=user.role)
        stage = LoginStage.issued
        log.info("login_succeeded", stage=stage, user_id=user.id)

        return LoginResult(
            token=token,
            user=UserView(
                user_id=user.id,
                email=user.email,
                full_name=user.full_name,
                role=user.role,
            ),
        )


# --- Module Notes -----------------------------------------------------------
# `stage` is only used for log correlation; the API maps the raised errors to
# 400/401/500 in `api.errors`.
