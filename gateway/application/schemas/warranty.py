"""Pydantic DTOs (Data Transfer Objects) for the Warranty feature."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _identification_to_str(value: object) -> object:
    # Identification numbers arrive as JSON numbers or strings; stored as text.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


IdentificationStr = Annotated[str, BeforeValidator(_identification_to_str)]


class WarrantyCreate(BaseModel):
    """Schema for creating a new warranty — carries only the creation audit."""

    customer_id: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1, examples=["Jane Doe"])
    customer_identification: IdentificationStr = Field(..., min_length=1, examples=["1020304050"])
    customer_email: str | None = Field(None, pattern=_EMAIL_PATTERN)
    customer_cellphone: str | None = None

    seller_id: str = Field(..., min_length=1)
    seller_name: str = Field(..., min_length=1)

    status: str = Field(..., min_length=1, examples=["pending"])
    is_active: bool = True

    products_relation_ids: list[str] | None = None
    notes_relation_ids: list[str] | None = None

    user_created_name: str = Field(..., min_length=1)
    user_created_id: str = Field(..., min_length=1)
    user_created_img: str | None = None


class WarrantyUpdate(BaseModel):
    """Partial update — only the fields present in the body are applied.

    The general update audit is mandatory. Sending ``status`` also stamps
    the status audit.
    """

    customer_name: str | None = Field(None, min_length=1)
    customer_identification: IdentificationStr | None = Field(None, min_length=1)
    customer_email: str | None = Field(None, pattern=_EMAIL_PATTERN)
    customer_cellphone: str | None = None

    seller_id: str | None = Field(None, min_length=1)
    seller_name: str | None = Field(None, min_length=1)

    status: str | None = Field(None, min_length=1)
    is_active: bool | None = None

    products_relation_ids: list[str] | None = None
    notes_relation_ids: list[str] | None = None

    user_updated_name: str = Field(..., min_length=1)
    user_updated_id: str = Field(..., min_length=1)
    user_updated_img: str | None = None


class WarrantyDeactivate(BaseModel):
    """Optional actor for a soft-delete."""

    user_updated_name: str | None = None
    user_updated_id: str | None = None
    user_updated_img: str | None = None


class WarrantyResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    customer_id: str
    customer_name: str
    customer_identification: str
    customer_email: str | None
    customer_cellphone: str | None
    seller_id: str
    seller_name: str
    status: str
    is_active: bool
    products_relation_ids: list[str] | None
    notes_relation_ids: list[str] | None
    user_created_date: datetime
    user_created_name: str
    user_created_id: str
    user_created_img: str | None
    user_updated_date: datetime | None
    user_updated_name: str | None
    user_updated_id: str | None
    user_updated_img: str | None
    user_updated_status_date: datetime | None
    user_updated_status_name: str | None
    user_updated_status_id: str | None
    user_updated_status_img: str | None

    model_config = {"from_attributes": True}
