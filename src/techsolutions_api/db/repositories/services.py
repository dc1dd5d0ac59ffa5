"""
techsolutions_api.db.repositories.services

Repository for catalog `Service` rows.

Responsibilities:
- Active-only reads, newest first.
- Create/update/soft-delete.
- Substring search over name or category.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from techsolutions_api.db.models import Service, utcnow


@dataclass(frozen=True, slots=True)
class ServiceFields:
    """User-supplied columns; create and update both write all of them."""

    name: str
    description: str | None
    price: Decimal
    category: str
    stock: int
    in_promotion: bool
    discount_percent: int
    image_url: str | None
    features: list[str]


def _apply(service: Service, fields: ServiceFields) -> None:
    service.name = fields.name
    service.description = fields.description
    service.price = fields.price
    service.category = fields.category
    service.stock = fields.stock
    service.in_promotion = fields.in_promotion
    service.discount_percent = fields.discount_percent
    service.image_url = fields.image_url
    service.feature_list = list(fields.features)


class ServiceRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _active(self):
        # Newest first; id breaks ties between rows created in the same instant.
        return (
            select(Service)
            .where(Service.is_active.is_(True))
            .order_by(desc(Service.created_at), desc(Service.id))
        )

    async def list_active(self) -> list[Service]:
        return list((await self._session.execute(self._active())).scalars().all())

    async def get_active(self, service_id: int) -> Service | None:
        stmt = select(Service).where(Service.id == service_id, Service.is_active.is_(True))
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def search(self, term: str) -> list[Service]:
        stmt = self._active().where(
            or_(
                Service.name.contains(term, autoescape=True),
                Service.category.contains(term, autoescape=True),
            )
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def create(self, *, fields: ServiceFields, created_by: int | None) -> Service:
        now = utcnow()
        service = Service(is_active=True, created_at=now, updated_at=now, created_by=created_by)
        _apply(service, fields)
        self._session.add(service)
        await self._session.flush()
        return service

    async def update(self, service_id: int, *, fields: ServiceFields) -> Service | None:
        service = await self.get_active(service_id)
        if service is None:
            return None
        _apply(service, fields)
        service.updated_at = utcnow()
        await self._session.flush()
        return service

    async def soft_delete(self, service_id: int) -> bool:
        # Any existing row may be deactivated, including one that already is.
        service = await self._session.get(Service, service_id)
        if service is None:
            return False
        service.is_active = False
        service.updated_at = utcnow()
        await self._session.flush()
        return True


# --- Module Notes -----------------------------------------------------------
# LIKE matching follows the database collation (case-insensitive on SQLite for
# ASCII and on the default SQL Server collation).
