"""
tests.conftest

Shared fixtures: an app bound to a throwaway SQLite file, an httpx client
over ASGITransport, and helpers to seed users and mint tokens.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.exc import OperationalError

from techsolutions_api.api.app import create_app
from techsolutions_api.auth.jwt import issue_token
from techsolutions_api.auth.passwords import hash_password
from techsolutions_api.db.models import User
from techsolutions_api.db.repositories.users import UserRepo
from techsolutions_api.settings import Settings

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"
ADMIN_EMAIL = "admin@techsolutions.test"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        jwt_expiration_minutes=30,
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # ASGITransport does not drive lifespan; run it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def make_user(
    app: FastAPI,
    *,
    email: str = ADMIN_EMAIL,
    password: str = ADMIN_PASSWORD,
    full_name: str | None = "Site Admin",
    role: str = "Admin",
    is_active: bool = True,
) -> User:
    async with app.state.sessionmaker() as session:
        user = await UserRepo(session).create(
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
            role=role,
            is_active=is_active,
        )
        await session.commit()
        return user


@pytest_asyncio.fixture
async def admin(app: FastAPI) -> User:
    return await make_user(app)


@pytest.fixture
def auth_headers(app: FastAPI, admin: User) -> dict[str, str]:
    token = issue_token(
        cfg=app.state.jwt_config,
        subject_id=admin.id,
        email=admin.email,
        role=admin.role,
    )
    return {"Authorization": f"Bearer {token}"}


class BrokenSession:
    """Stands in for an AsyncSession whose database is unreachable."""

    def __init__(self) -> None:
        self.rolled_back = False
        self.touched = False

    def _fail(self) -> OperationalError:
        self.touched = True
        return OperationalError("SELECT 1", {}, ConnectionRefusedError("database is unavailable"))

    async def execute(self, *args, **kwargs):
        raise self._fail()

    async def get(self, *args, **kwargs):
        raise self._fail()

    async def rollback(self) -> None:
        self.rolled_back = True


# --- Module Notes -----------------------------------------------------------
# Each test gets its own database file via tmp_path, so tests never share rows.
