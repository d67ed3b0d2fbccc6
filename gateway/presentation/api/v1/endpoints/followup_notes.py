"""Client follow-up note endpoints. Every route needs a tenant ``?ref=``."""

from datetime import datetime

from fastapi import APIRouter, Body, Depends, Query, status

from gateway.application.schemas import (
    ApiResponse,
    FollowupNoteCreate,
    FollowupNoteDeactivate,
    FollowupNoteResponse,
    FollowupNoteStatsResponse,
    FollowupNoteUpdate,
    PaginatedResponse,
)
from gateway.application.services import FollowupNoteService
from gateway.config import get_settings
from gateway.domain.entities import FollowupNoteFilter, PageRequest
from gateway.infrastructure.dependencies import get_followup_note_service

router = APIRouter(prefix="/client-followup-notes", tags=["Client Follow-up Notes"])


def _to_response(note) -> FollowupNoteResponse:
    return FollowupNoteResponse.model_validate(note, from_attributes=True)


def _split_ids(values: list[str] | None) -> list[str] | None:
    """Accept ``?clients_ids=a,b`` as well as ``?clients_ids=a&clients_ids=b``."""
    if not values:
        return None
    ids = [part.strip() for value in values for part in value.split(",") if part.strip()]
    return ids or None


def note_filters(
    client_id: str | None = Query(None),
    clients_ids: list[str] | None = Query(None, description="Comma-separated or repeated"),
    tag: str | None = Query(None, description="Substring match, case-insensitive"),
    created_by_user_id: str | None = Query(None),
    created_by_user_email: str | None = Query(None),
    client_name: str | None = Query(None, description="Substring match, case-insensitive"),
    date_start: datetime | None = Query(None, description="Created on or after"),
    date_end: datetime | None = Query(None, description="Created on or before"),
) -> FollowupNoteFilter:
    return FollowupNoteFilter(
        client_id=client_id,
        clients_ids=_split_ids(clients_ids),
        tag=tag,
        created_by_user_id=created_by_user_id,
        created_by_user_email=created_by_user_email,
        client_name=client_name,
        date_start=date_start,
        date_end=date_end,
    )


@router.get("", response_model=PaginatedResponse[FollowupNoteResponse])
async def list_notes(
    page: int = Query(1, ge=1),
    limit: int = Query(get_settings().default_page_limit, ge=1),
    filters: FollowupNoteFilter = Depends(note_filters),
    service: FollowupNoteService = Depends(get_followup_note_service, scope="function"),
) -> PaginatedResponse[FollowupNoteResponse]:
    """Retrieve a filtered, paginated list of follow-up notes."""
    result = await service.list_notes(filters, PageRequest(page=page, limit=limit))
    return PaginatedResponse.from_page(result, _to_response)


@router.get(
    "/stats",
    response_model=ApiResponse[FollowupNoteStatsResponse],
    response_model_exclude_unset=True,
)
async def get_stats(
    filters: FollowupNoteFilter = Depends(note_filters),
    service: FollowupNoteService = Depends(get_followup_note_service, scope="function"),
) -> ApiResponse[FollowupNoteStatsResponse]:
    """Note counts for the last 30 days and for each month of the current year."""
    stats = await service.get_stats(filters)
    return ApiResponse(
        success=True,
        data=FollowupNoteStatsResponse.model_validate(stats, from_attributes=True),
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[FollowupNoteResponse],
    response_model_exclude_unset=True,
)
async def get_note(
    note_id: int,
    service: FollowupNoteService = Depends(get_followup_note_service, scope="function"),
) -> ApiResponse[FollowupNoteResponse]:
    note = await service.get_note(note_id)
    return ApiResponse(success=True, data=_to_response(note))


@router.post(
    "",
    response_model=ApiResponse[FollowupNoteResponse],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    data: FollowupNoteCreate,
    service: FollowupNoteService = Depends(get_followup_note_service, scope="function"),
) -> ApiResponse[FollowupNoteResponse]:
    note = await service.create_note(data)
    return ApiResponse(success=True, data=_to_response(note))


@router.patch(
    "/{note_id}",
    response_model=ApiResponse[FollowupNoteResponse],
    response_model_exclude_unset=True,
)
@router.put(
    "/{note_id}",
    response_model=ApiResponse[FollowupNoteResponse],
    response_model_exclude_unset=True,
)
async def update_note(
    note_id: int,
    data: FollowupNoteUpdate,
    service: FollowupNoteService = Depends(get_followup_note_service, scope="function"),
) -> ApiResponse[FollowupNoteResponse]:
    """Apply the fields present in the body; PUT and PATCH behave the same."""
    note = await service.update_note(note_id, data)
    return ApiResponse(success=True, data=_to_response(note))


@router.delete(
    "/{note_id}",
    response_model=ApiResponse[FollowupNoteResponse],
    response_model_exclude_unset=True,
)
async def deactivate_note(
    note_id: int,
    data: FollowupNoteDeactivate | None = Body(None),
    service: FollowupNoteService = Depends(get_followup_note_service, scope="function"),
) -> ApiResponse[FollowupNoteResponse]:
    """Soft-delete: the row stays, only the updater is re-stamped."""
    note = await service.deactivate_note(note_id, data)
    return ApiResponse(success=True, data=_to_response(note), message="Note deactivated")
