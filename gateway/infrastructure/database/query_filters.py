"""Filter-to-SQL translation shared by the paginated listing repositories.

A filter object is turned into one ordered list of predicates. The count
statement and the page statement are both built from that same list, so
``total`` always describes the rows the pages are cut from.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import ColumnElement, Select, func, select

from gateway.domain.entities import FollowupNoteFilter, PageRequest, WarrantyFilter
from gateway.infrastructure.database.models import FollowupNoteModel, WarrantyModel

_LIKE_ESCAPE = "\\"


def _like_pattern(value: str) -> str:
    escaped = (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class ConditionBuilder:
    """Collects AND-ed predicates; a missing value never adds a clause."""

    def __init__(self) -> None:
        self._conditions: list[ColumnElement[bool]] = []

    def equals(self, column: Any, value: Any) -> "ConditionBuilder":
        if value is not None:
            self._conditions.append(column == value)
        return self

    def contains(self, column: Any, value: str | None) -> "ConditionBuilder":
        """Case-insensitive substring match."""
        if value:
            self._conditions.append(column.ilike(_like_pattern(value), escape=_LIKE_ESCAPE))
        return self

    def one_of(self, column: Any, values: Iterable[Any] | None) -> "ConditionBuilder":
        if values:
            self._conditions.append(column.in_(list(values)))
        return self

    def between(
        self, column: Any, start: datetime | None, end: datetime | None
    ) -> "ConditionBuilder":
        """Inclusive on both ends; either bound may be omitted."""
        if start is not None:
            self._conditions.append(column >= start)
        if end is not None:
            self._conditions.append(column <= end)
        return self

    @property
    def conditions(self) -> tuple[ColumnElement[bool], ...]:
        return tuple(self._conditions)


@dataclass(frozen=True)
class PaginatedQuery:
    """A "count all matches" statement and a "fetch one page" statement."""

    count: Select
    page: Select


def paginate(
    model: type,
    conditions: Sequence[ColumnElement[bool]],
    order_by: Sequence[Any],
    page: PageRequest,
) -> PaginatedQuery:
    count_stmt = select(func.count()).select_from(model).where(*conditions)
    page_stmt = (
        select(model)
        .where(*conditions)
        .order_by(*order_by)
        .offset(page.offset)
        .limit(page.limit)
    )
    return PaginatedQuery(count=count_stmt, page=page_stmt)


# ── Warranties ───────────────────────────────────────────────────────

# Most recently touched first; creation time and id make the order total.
WARRANTY_ORDER = (
    func.coalesce(WarrantyModel.user_updated_date, WarrantyModel.user_created_date).desc(),
    WarrantyModel.user_created_date.desc(),
    WarrantyModel.id.desc(),
)


def warranty_conditions(filters: WarrantyFilter) -> tuple[ColumnElement[bool], ...]:
    return (
        ConditionBuilder()
        .contains(WarrantyModel.customer_name, filters.customer_name)
        .equals(WarrantyModel.customer_identification, filters.customer_identification)
        .equals(WarrantyModel.seller_id, filters.seller_id)
        .equals(WarrantyModel.status, filters.status)
        .equals(WarrantyModel.is_active, filters.is_active)
        .between(WarrantyModel.user_created_date, filters.date_start, filters.date_end)
        .conditions
    )


def warranty_query(filters: WarrantyFilter, page: PageRequest) -> PaginatedQuery:
    return paginate(WarrantyModel, warranty_conditions(filters), WARRANTY_ORDER, page)


# ── Client follow-up notes ───────────────────────────────────────────

FOLLOWUP_NOTE_ORDER = (
    FollowupNoteModel.updated_at.desc(),
    FollowupNoteModel.created_at.desc(),
    FollowupNoteModel.id.desc(),
)


def followup_note_conditions(filters: FollowupNoteFilter) -> tuple[ColumnElement[bool], ...]:
    return (
        ConditionBuilder()
        .equals(FollowupNoteModel.client_id, filters.client_id)
        .one_of(FollowupNoteModel.client_id, filters.clients_ids)
        .contains(FollowupNoteModel.tag, filters.tag)
        .equals(FollowupNoteModel.created_by_user_id, filters.created_by_user_id)
        .equals(FollowupNoteModel.created_by_user_email, filters.created_by_user_email)
        .contains(FollowupNoteModel.client_name, filters.client_name)
        .between(FollowupNoteModel.created_at, filters.date_start, filters.date_end)
        .conditions
    )


def followup_note_query(filters: FollowupNoteFilter, page: PageRequest) -> PaginatedQuery:
    return paginate(FollowupNoteModel, followup_note_conditions(filters), FOLLOWUP_NOTE_ORDER, page)
