"""
techsolutions_api.db.init_db

Create tables for local development and tests. Production uses Alembic.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from techsolutions_api.db import models  # noqa: F401  # registers tables on Base.metadata
from techsolutions_api.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
