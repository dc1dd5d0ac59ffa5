"""
techsolutions_api.services.catalog_service

Catalog use cases (transaction owner).

Responsibilities:
- Delegate reads/writes to `ServiceRepo` and commit writes.
- Turn "row missing" into `NotFoundError` and store faults into `InternalError`.
- Treat a blank search term as "list everything active".
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from techsolutions_api.db.models import Service
from techsolutions_api.db.repositories.services import ServiceFields, ServiceRepo
from techsolutions_api.errors import InternalError, NotFoundError
from techsolutions_api.observability.logging import get_logger

log = get_logger(__name__)


def _not_found(service_id: int) -> NotFoundError:
    return NotFoundError(f"Service with ID {service_id} not found")


class CatalogService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._repo = ServiceRepo(session)

    @asynccontextmanager
    async def _store(self, action: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._session.rollback()
            log.error("store_error", action=action, exc_info=True)
            raise InternalError(f"Error {action}", detail=str(e)) from e

    async def list_active(self) -> list[Service]:
        async with self._store("retrieving services"):
            return await self._repo.list_active()

    async def get(self, service_id: int) -> Service:
        async with self._store("retrieving service"):
            service = await self._repo.get_active(service_id)
        if service is None:
            raise _not_found(service_id)
        return service

    async def search(self, term: str | None) -> list[Service]:
        if term is None or not term.strip():
            return await self.list_active()
        async with self._store("searching services"):
            return await self._repo.search(term)

    async def create(self, *, fields: ServiceFields, created_by: int) -> Service:
        async with self._store("creating service"):
            service = await self._repo.create(fields=fields, created_by=created_by)
            await self._session.commit()
        log.info("service_created", service_id=service.id, created_by=created_by)
        return service

    async def update(self, service_id: int, *, fields: ServiceFields) -> Service:
        async with self._store("updating service"):
            service = await self._repo.update(service_id, fields=fields)
            if service is not None:
                await self._session.commit()
        if service is None:
            raise _not_found(service_id)
        log.info("service_updated", service_id=service_id)
        return service

    async def delete(self, service_id: int) -> None:
        async with self._store("deleting service"):
            deleted = await self._repo.soft_delete(service_id)
            if deleted:
                await self._session.commit()
        if not deleted:
            raise _not_found(service_id)
        log.info("service_deleted", service_id=service_id)


# --- Module Notes -----------------------------------------------------------
# The creator id comes from the validated token; it is stored as-is and not
# checked against `users` (token validity is stateless).
