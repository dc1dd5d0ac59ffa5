"""
techsolutions_api.api.routers.services

Catalog endpoints.

Responsibilities:
- Public reads: list, fetch by id, substring search.
- Bearer-protected writes: create (creator taken from the token), full
  replace, soft delete.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response
from starlette.status import HTTP_201_CREATED

from techsolutions_api.api.deps import catalog_service
from techsolutions_api.api.schemas import (
    Envelope,
    ServiceIn,
    ServiceListResponse,
    ServiceOut,
    ServiceResponse,
)
from techsolutions_api.auth.deps import get_principal
from techsolutions_api.auth.models import Principal
from techsolutions_api.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/services", tags=["services"])

# Ids outside the INTEGER column range are rejected as bad input, not looked up.
ServiceId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=ServiceListResponse)
async def list_services(svc: CatalogService = Depends(catalog_service)) -> ServiceListResponse:
    rows = await svc.list_active()
    return ServiceListResponse.of("Services retrieved successfully", rows)


# Declared before "/{service_id}" so "search" is never parsed as an id.
@router.get("/search", response_model=ServiceListResponse)
async def search_services(
    term: str | None = None,
    svc: CatalogService = Depends(catalog_service),
) -> ServiceListResponse:
    rows = await svc.search(term)
    return ServiceListResponse.of("Search completed", rows)


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(
    service_id: ServiceId,
    svc: CatalogService = Depends(catalog_service),
) -> ServiceResponse:
    row = await svc.get(service_id)
    return ServiceResponse(message="Service found", data=ServiceOut.from_row(row))


@router.post("", response_model=ServiceResponse, status_code=HTTP_201_CREATED)
async def create_service(
    request: Request,
    response: Response,
    body: ServiceIn,
    principal: Principal = Depends(get_principal),
    svc: CatalogService = Depends(catalog_service),
) -> ServiceResponse:
    row = await svc.create(fields=body.to_fields(), created_by=principal.user_id)
    response.headers["Location"] = str(request.url_for("get_service", service_id=row.id))
    return ServiceResponse(message="Service created successfully", data=ServiceOut.from_row(row))


@router.put(
    "/{service_id}",
    response_model=ServiceResponse,
    dependencies=[Depends(get_principal)],
)
async def update_service(
    service_id: ServiceId,
    body: ServiceIn,
    svc: CatalogService = Depends(catalog_service),
) -> ServiceResponse:
    row = await svc.update(service_id, fields=body.to_fields())
    return ServiceResponse(message="Service updated successfully", data=ServiceOut.from_row(row))


@router.delete("/{service_id}", response_model=Envelope, dependencies=[Depends(get_principal)])
async def delete_service(
    service_id: ServiceId,
    svc: CatalogService = Depends(catalog_service),
) -> Envelope:
    await svc.delete(service_id)
    return Envelope(message="Service deleted successfully")


# --- Module Notes -----------------------------------------------------------
# Write endpoints resolve `get_principal` before the body runs, so an invalid
# token never reaches the service layer.
