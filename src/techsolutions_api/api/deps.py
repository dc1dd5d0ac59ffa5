"""
techsolutions_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide settings and DB sessions from `app.state`.
- Build request-scoped service objects.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from techsolutions_api.auth.deps import jwt_config
from techsolutions_api.auth.jwt import JwtConfig
from techsolutions_api.services.auth_service import AuthService
from techsolutions_api.services.catalog_service import CatalogService
from techsolutions_api.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the app lifespan (see `techsolutions_api.api.app.create_app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is owned by the service layer.
    async with session_factory() as session:
        yield session


def catalog_service(session: AsyncSession = Depends(db_session)) -> CatalogService:
    return CatalogService(session=session)


def auth_service(
    session: AsyncSession = Depends(db_session),
    cfg: JwtConfig = Depends(jwt_config),
) -> AuthService:
    return AuthService(session=session, jwt_config=cfg)
