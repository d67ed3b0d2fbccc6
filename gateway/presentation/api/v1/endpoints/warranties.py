"""Warranty CRUD endpoints."""

from datetime import datetime

from fastapi import APIRouter, Body, Depends, Query, status

from gateway.application.schemas import (
    ApiResponse,
    PaginatedResponse,
    WarrantyCreate,
    WarrantyDeactivate,
    WarrantyResponse,
    WarrantyUpdate,
)
from gateway.application.services import WarrantyService
from gateway.config import get_settings
from gateway.domain.entities import PageRequest, WarrantyFilter
from gateway.infrastructure.dependencies import get_warranty_service

router = APIRouter(prefix="/warranties", tags=["Warranties"])


def _to_response(warranty) -> WarrantyResponse:
    return WarrantyResponse.model_validate(warranty, from_attributes=True)


@router.get("", response_model=PaginatedResponse[WarrantyResponse])
async def list_warranties(
    page: int = Query(1, ge=1),
    limit: int = Query(get_settings().default_page_limit, ge=1),
    customer_name: str | None = Query(None, description="Substring match, case-insensitive"),
    customer_identification: str | None = Query(None),
    seller_id: str | None = Query(None),
    status_: str | None = Query(None, alias="status"),
    is_active: bool | None = Query(None),
    date_start: datetime | None = Query(None, description="Created on or after"),
    date_end: datetime | None = Query(None, description="Created on or before"),
    service: WarrantyService = Depends(get_warranty_service, scope="function"),
) -> PaginatedResponse[WarrantyResponse]:
    """Retrieve a filtered, paginated list of warranties."""
    filters = WarrantyFilter(
        customer_name=customer_name,
        customer_identification=customer_identification,
        seller_id=seller_id,
        status=status_,
        is_active=is_active,
        date_start=date_start,
        date_end=date_end,
    )
    result = await service.list_warranties(filters, PageRequest(page=page, limit=limit))
    return PaginatedResponse.from_page(result, _to_response)


@router.get(
    "/{warranty_id}",
    response_model=ApiResponse[WarrantyResponse],
    response_model_exclude_unset=True,
)
async def get_warranty(
    warranty_id: int,
    service: WarrantyService = Depends(get_warranty_service, scope="function"),
) -> ApiResponse[WarrantyResponse]:
    """Retrieve a single warranty by ID."""
    warranty = await service.get_warranty(warranty_id)
    return ApiResponse(success=True, data=_to_response(warranty))


@router.post(
    "",
    response_model=ApiResponse[WarrantyResponse],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_warranty(
    data: WarrantyCreate,
    service: WarrantyService = Depends(get_warranty_service, scope="function"),
) -> ApiResponse[WarrantyResponse]:
    """Create a new warranty."""
    warranty = await service.create_warranty(data)
    return ApiResponse(success=True, data=_to_response(warranty))


@router.patch(
    "/{warranty_id}",
    response_model=ApiResponse[WarrantyResponse],
    response_model_exclude_unset=True,
)
@router.put(
    "/{warranty_id}",
    response_model=ApiResponse[WarrantyResponse],
    response_model_exclude_unset=True,
)
async def update_warranty(
    warranty_id: int,
    data: WarrantyUpdate,
    service: WarrantyService = Depends(get_warranty_service, scope="function"),
) -> ApiResponse[WarrantyResponse]:
    """Apply the fields present in the body; PUT and PATCH behave the same."""
    warranty = await service.update_warranty(warranty_id, data)
    return ApiResponse(success=True, data=_to_response(warranty))


@router.delete(
    "/{warranty_id}",
    response_model=ApiResponse[WarrantyResponse],
    response_model_exclude_unset=True,
)
async def deactivate_warranty(
    warranty_id: int,
    data: WarrantyDeactivate | None = Body(None),
    service: WarrantyService = Depends(get_warranty_service, scope="function"),
) -> ApiResponse[WarrantyResponse]:
    """Soft-delete: flips ``is_active`` to false."""
    warranty = await service.deactivate_warranty(warranty_id, data)
    return ApiResponse(
        success=True,
        data=_to_response(warranty),
        message="Warranty deactivated",
    )
