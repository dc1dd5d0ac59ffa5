"""
techsolutions_api.db.base

SQLAlchemy declarative base shared by all ORM models.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# Alembic (`alembic/env.py`) and `db.init_db` both discover tables through
# `Base.metadata`, so every model must inherit from `Base`.
