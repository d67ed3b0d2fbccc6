"""Calendar booking proxy endpoints (Google Calendar)."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from gateway.application.schemas import (
    ApiResponse,
    AvailabilityRequest,
    AvailabilityResponse,
    BookEventRequest,
    UpdateEventRequest,
)
from gateway.application.services import CalendarService
from gateway.infrastructure.dependencies import get_calendar_service

router = APIRouter(prefix="/calendar", tags=["Calendar"])

_ENVELOPE = {"response_model_exclude_unset": True}


@router.get("/list", response_model=ApiResponse[list[dict[str, Any]]], **_ENVELOPE)
async def list_calendars(
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[list[dict[str, Any]]]:
    calendars = await service.list_calendars()
    return ApiResponse(success=True, data=calendars)


@router.get("/events", response_model=ApiResponse[list[dict[str, Any]]], **_ENVELOPE)
async def list_events(
    calendarId: str | None = Query(None),
    timeMin: str | None = Query(None),
    timeMax: str | None = Query(None),
    periodStart: str | None = Query(None, description="Alias of timeMin"),
    periodEnd: str | None = Query(None, description="Alias of timeMax"),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[list[dict[str, Any]]]:
    events = await service.list_events(
        calendarId,
        time_min=timeMin or periodStart,
        time_max=timeMax or periodEnd,
    )
    return ApiResponse(success=True, data=events)


@router.get("/event/{event_id}", response_model=ApiResponse[dict[str, Any]], **_ENVELOPE)
async def get_event(
    event_id: str,
    calendarId: str | None = Query(None),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[dict[str, Any]]:
    event = await service.get_event(event_id, calendarId)
    return ApiResponse(success=True, data=event)


@router.post(
    "/event",
    response_model=ApiResponse[dict[str, Any]],
    status_code=status.HTTP_201_CREATED,
    **_ENVELOPE,
)
async def book_event(
    data: BookEventRequest,
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[dict[str, Any]]:
    """Book a slot; 409 with the conflicting events when it is busy."""
    event = await service.book(data)
    return ApiResponse(success=True, data=event, message="Event created")


@router.put("/event/{event_id}", response_model=ApiResponse[dict[str, Any]], **_ENVELOPE)
async def update_event(
    event_id: str,
    data: UpdateEventRequest,
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[dict[str, Any]]:
    event = await service.update_event(event_id, data)
    return ApiResponse(success=True, data=event, message="Event updated")


@router.delete("/event/{event_id}", response_model=ApiResponse[None], **_ENVELOPE)
async def delete_event(
    event_id: str,
    calendarId: str | None = Query(None),
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[None]:
    await service.delete_event(event_id, calendarId)
    return ApiResponse(success=True, message="Event deleted")


@router.post(
    "/check-availability",
    response_model=ApiResponse[AvailabilityResponse],
    **_ENVELOPE,
)
async def check_availability(
    data: AvailabilityRequest,
    service: CalendarService = Depends(get_calendar_service),
) -> ApiResponse[AvailabilityResponse]:
    conflicts = await service.check_availability(
        data.startDateTime, data.endDateTime, data.calendarId
    )
    return ApiResponse(
        success=True,
        data=AvailabilityResponse(available=not conflicts, conflictingEvents=conflicts),
    )
