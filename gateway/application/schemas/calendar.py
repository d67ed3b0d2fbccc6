"""Pydantic DTOs for the calendar booking proxy.

Field names follow the camelCase used by existing booking clients.
"""

from pydantic import BaseModel, Field


class Attendee(BaseModel):
    email: str = Field(..., min_length=3)


class BookEventRequest(BaseModel):
    """Body for booking an appointment; ``endDateTime`` defaults to start + duration."""

    calendarId: str = Field(..., min_length=1)
    startDateTime: str = Field(..., min_length=1, examples=["2026-10-20T09:00:00"])
    endDateTime: str | None = None
    summary: str | None = None
    description: str | None = None
    location: str | None = None
    attendees: list[Attendee] | None = None


class UpdateEventRequest(BaseModel):
    calendarId: str | None = None
    summary: str | None = None
    description: str | None = None
    location: str | None = None
    startDateTime: str | None = None
    endDateTime: str | None = None
    attendees: list[Attendee] | None = None


class AvailabilityRequest(BaseModel):
    calendarId: str | None = None
    startDateTime: str = Field(..., min_length=1)
    endDateTime: str | None = None


class AvailabilityResponse(BaseModel):
    available: bool
    conflictingEvents: list[dict] = Field(default_factory=list)
