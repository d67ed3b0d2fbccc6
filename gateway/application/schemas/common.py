"""Response envelopes shared by every endpoint."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from gateway.domain.entities import Page

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope: ``{success, data?, error?, message?}``.

    Endpoints are declared with ``response_model_exclude_unset=True`` so
    fields left unset (usually ``error``/``message``) are omitted.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    """Envelope for paginated listings.

    ``have_previus_page`` is spelled this way on purpose: existing clients
    depend on the key.
    """

    success: bool
    data: list[T]
    data_items: int
    page_current: int
    page_total: int
    have_next_page: bool
    have_previus_page: bool

    @classmethod
    def from_page(cls, page: Page[Any], to_item: Callable[[Any], T]) -> "PaginatedResponse[T]":
        return cls(
            success=True,
            data=[to_item(item) for item in page.items],
            data_items=page.total,
            page_current=page.page_current,
            page_total=page.page_total,
            have_next_page=page.have_next_page,
            have_previus_page=page.have_previous_page,
        )


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    success: bool = False
    error: str
    message: str | None = None
