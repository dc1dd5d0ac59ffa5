"""
techsolutions_api.api.routers.health

Probe endpoints for the catalog API.

Responsibilities:
- Liveness (`/healthz`): answers without touching the catalog store.
- Readiness (`/readyz`): one round-trip to the catalog database.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from techsolutions_api.api.deps import db_session

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: the process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Readiness: the users/services database answers a trivial query.
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Probes sit outside /api and need no token. A failing /readyz goes through the
# generic 500 handler, so it still returns the error envelope.
