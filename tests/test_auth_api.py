"""
tests.test_auth_api

Login and token gate behaviour over HTTP.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import httpx
import pytest
from fastapi import FastAPI

from techsolutions_api.api.deps import db_session
from techsolutions_api.auth.jwt import JwtConfig, issue_token
from techsolutions_api.db.models import User
from techsolutions_api.errors import InputValidationError
from techsolutions_api.services.auth_service import INVALID_CREDENTIALS, AuthService
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, BrokenSession, make_user


@pytest.mark.asyncio
async def test_login_returns_token_and_public_user(
    client: httpx.AsyncClient, admin: User
) -> None:
    r = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["token"].count(".") == 2
    assert body["user"] == {
        "userId": admin.id,
        "email": ADMIN_EMAIL,
        "fullName": "Site Admin",
        "role": "Admin",
    }
    assert "passwordHash" not in r.text and "password_hash" not in r.text


@pytest.mark.asyncio
async def test_login_token_passes_the_gate(client: httpx.AsyncClient, admin: User) -> None:
    r = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    token = r.json()["token"]

    r = await client.get("/api/auth/validate", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Token is valid", "userId": str(admin.id)}


@pytest.mark.asyncio
async def test_unknown_email_and_wrong_password_are_indistinguishable(
    client: httpx.AsyncClient, admin: User
) -> None:
    wrong_password = await client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": "not-the-password"}
    )
    unknown_email = await client.post(
        "/api/auth/login", json={"email": "ghost@techsolutions.test", "password": "whatever"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.content == unknown_email.content
    assert wrong_password.json() == {"success": False, "message": INVALID_CREDENTIALS}


@pytest.mark.asyncio
async def test_inactive_user_cannot_log_in_even_with_correct_password(
    app: FastAPI, client: httpx.AsyncClient
) -> None:
    await make_user(app, email="retired@techsolutions.test", password="right-password", is_active=False)

    r = await client.post(
        "/api/auth/login", json={"email": "retired@techsolutions.test", "password": "right-password"}
    )

    assert r.status_code == 401
    assert r.json()["message"] == INVALID_CREDENTIALS


@pytest.mark.asyncio
async def test_email_match_is_exact(client: httpx.AsyncClient, admin: User) -> None:
    r = await client.post(
        "/api/auth/login", json={"email": "admin@techsolutions", "password": ADMIN_PASSWORD}
    )
    assert r.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"email": ADMIN_EMAIL},
        {"password": ADMIN_PASSWORD},
        {"email": "", "password": ADMIN_PASSWORD},
        {"email": "   ", "password": ADMIN_PASSWORD},
        {"email": ADMIN_EMAIL, "password": ""},
    ],
)
async def test_login_rejects_missing_input(client: httpx.AsyncClient, payload: dict) -> None:
    r = await client.post("/api/auth/login", json=payload)

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["message"] == "Invalid data"
    assert body["errors"]


@pytest.mark.asyncio
async def test_service_rejects_blank_input_without_touching_store() -> None:
    session = BrokenSession()
    cfg = JwtConfig(secret="x" * 32, issuer="i", audience="a", ttl_minutes=5)
    svc = AuthService(session=session, jwt_config=cfg)  # type: ignore[arg-type]

    with pytest.raises(InputValidationError) as exc_info:
        await svc.login(email="", password=None)

    assert session.touched is False
    assert exc_info.value.errors == ["email: field required", "password: field required"]


@pytest.mark.asyncio
async def test_store_failure_is_internal_error_not_bad_credentials(
    app: FastAPI, client: httpx.AsyncClient
) -> None:
    async def _broken() -> BrokenSession:
        return BrokenSession()

    app.dependency_overrides[db_session] = _broken
    try:
        r = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "x"})
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["message"] != INVALID_CREDENTIALS
    # Diagnostic is shown outside prod.
    assert "database is unavailable" in body["error"]


@pytest.mark.asyncio
async def test_validate_requires_bearer_token(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/auth/validate")

    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"
    assert r.json()["success"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("header", ["Bearer not.a.token", "Basic YWRtaW46YWRtaW4=", "Bearer "])
async def test_validate_rejects_bad_credentials(client: httpx.AsyncClient, header: str) -> None:
    r = await client.get("/api/auth/validate", headers={"Authorization": header})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_validate_rejects_expired_token(app: FastAPI, client: httpx.AsyncClient) -> None:
    cfg: JwtConfig = app.state.jwt_config
    issued = datetime.now(tz=UTC) - timedelta(minutes=cfg.ttl_minutes, seconds=1)
    token = issue_token(cfg=cfg, subject_id=1, email=ADMIN_EMAIL, role="Admin", now=issued)

    r = await client.get("/api/auth/validate", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 401
    assert r.json()["message"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_validate_rejects_token_signed_with_other_secret(
    app: FastAPI, client: httpx.AsyncClient
) -> None:
    cfg: JwtConfig = app.state.jwt_config
    forged_cfg = JwtConfig(
        secret="another-secret-0123456789-abcdefghijkl",
        issuer=cfg.issuer,
        audience=cfg.audience,
        ttl_minutes=cfg.ttl_minutes,
    )
    token = issue_token(cfg=forged_cfg, subject_id=1, email=ADMIN_EMAIL, role="Admin")

    r = await client.get("/api/auth/validate", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 401


# --- Module Notes -----------------------------------------------------------
# Rejection bodies are compared whole so that login failures stay
# indistinguishable to clients.
