"""
techsolutions_api.api.app

FastAPI app factory.

Responsibilities:
- Build the application and register routers, middleware and error handlers.
- Turn `Settings` into the immutable `JwtConfig` shared by login and the
  token gate.
- Own the DB engine lifecycle (created on startup, disposed on shutdown).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from techsolutions_api import __version__
from techsolutions_api.api.errors import register_exception_handlers
from techsolutions_api.api.routers.auth import router as auth_router
from techsolutions_api.api.routers.health import router as health_router
from techsolutions_api.api.routers.services import router as services_router
from techsolutions_api.auth.jwt import JwtConfig
from techsolutions_api.db.init_db import init_db
from techsolutions_api.db.session import create_engine, create_sessionmaker
from techsolutions_api.observability.logging import configure_logging, get_logger
from techsolutions_api.observability.middleware import RequestContextMiddleware
from techsolutions_api.settings import Settings

log = get_logger(__name__)


def jwt_config_from(settings: Settings) -> JwtConfig:
    return JwtConfig(
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        ttl_minutes=settings.jwt_expiration_minutes,
    )


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings.database_url)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema is managed by Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="TechSolutions API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.jwt_config = jwt_config_from(settings)

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app, settings=settings)

    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(services_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Nothing below this module reads the environment; configuration flows in
# through `app.state`.
