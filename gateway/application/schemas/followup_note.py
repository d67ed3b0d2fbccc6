"""Pydantic DTOs for client follow-up notes."""

from datetime import datetime

from pydantic import BaseModel, Field


class FollowupNoteCreate(BaseModel):
    """Schema for creating a note; the creator is also recorded as first updater."""

    title: str = Field(..., min_length=1, examples=["Called client"])
    description: str = Field(..., min_length=1)
    tag: str | None = None
    file_url: str | None = None
    client_id: str = Field(..., min_length=1, examples=["c1"])
    client_name: str | None = None

    created_by_user_id: str = Field(..., min_length=1)
    created_by_user_name: str = Field(..., min_length=1)
    created_by_user_image: str | None = None
    created_by_user_email: str | None = None


class FollowupNoteUpdate(BaseModel):
    """Partial update — only the fields present in the body are applied."""

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    tag: str | None = None
    file_url: str | None = None

    updated_by_user_id: str = Field(..., min_length=1)
    updated_by_user_name: str = Field(..., min_length=1)
    updated_by_user_image: str | None = None


class FollowupNoteDeactivate(BaseModel):
    """Optional actor for a soft-delete."""

    updated_by_user_id: str | None = None
    updated_by_user_name: str | None = None
    updated_by_user_image: str | None = None


class FollowupNoteResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    description: str
    tag: str | None
    file_url: str | None
    client_id: str
    client_name: str | None
    created_by_user_id: str
    created_by_user_name: str
    created_by_user_image: str | None
    created_by_user_email: str | None
    updated_by_user_id: str | None
    updated_by_user_name: str | None
    updated_by_user_image: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class FollowupNoteStatsResponse(BaseModel):
    """Dense daily/monthly counts; keys keep their insertion order."""

    daily: dict[str, int]
    monthly: dict[str, int]

    model_config = {"from_attributes": True}
