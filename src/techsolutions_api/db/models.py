"""
techsolutions_api.db.models

Persistence schema.

Responsibilities:
- User: admin principals that can log in (provisioned out of band).
- Service: catalog items, soft-deleted via `is_active`.
- Feature list (de)serialization for the `services.features` text column.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from techsolutions_api.db.base import Base


def utcnow() -> datetime:
    # Stored as naive UTC so values compare the same on SQLite and server databases.
    return datetime.now(tz=UTC).replace(tzinfo=None)


def dump_features(features: list[str]) -> str:
    return json.dumps(features, ensure_ascii=False)


def load_features(raw: str | None) -> list[str]:
    """
    Decode the stored feature list.

    Anything that is not a JSON array of strings reads back as an empty list:
    a corrupted row must not make the item unreadable.
    """

    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return []
    return value


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="Admin")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)


class Service(Base):
    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    in_promotion: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    discount_percent: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # JSON array serialized to text; read through `feature_list`.
    features: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=utcnow)

    # Weak back-reference: no relationship() and no cascade. Use UserRepo.get to resolve.
    created_by: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)

    __table_args__ = (Index("ix_services_active_created", "is_active", "created_at"),)

    @property
    def feature_list(self) -> list[str]:
        return load_features(self.features)

    @feature_list.setter
    def feature_list(self, value: list[str]) -> None:
        self.features = dump_features(value)


# --- Module Notes -----------------------------------------------------------
# Numeric(18, 2) round-trips as Decimal; the API schema turns it into a JSON number.
