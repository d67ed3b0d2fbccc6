"""Concrete repository implementation for FollowupNote backed by SQLAlchemy."""

from dataclasses import fields
from datetime import date, datetime

from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gateway.application.interfaces import FollowupNoteRepository
from gateway.domain.entities import FollowupNote, FollowupNoteFilter, Page, PageRequest
from gateway.infrastructure.database.models import FollowupNoteModel
from gateway.infrastructure.database.query_filters import (
    followup_note_conditions,
    followup_note_query,
)

_COLUMNS = tuple(f.name for f in fields(FollowupNote))


def _as_date(value: date | datetime | str) -> date:
    # PostgreSQL's date() yields a date, SQLite's a "YYYY-MM-DD" string.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class SQLAlchemyFollowupNoteRepository(FollowupNoteRepository):
    """Implements the FollowupNoteRepository port using SQLAlchemy async sessions.

    CRUD runs on the request session. The aggregate counts open their own
    short-lived sessions from ``session_factory`` so the stats service can
    run them concurrently (an AsyncSession allows one operation at a time).
    """

    def __init__(self, session: AsyncSession, session_factory: async_sessionmaker[AsyncSession]):
        self._session = session
        self._session_factory = session_factory

    def _to_entity(self, model: FollowupNoteModel) -> FollowupNote:
        return FollowupNote(**{name: getattr(model, name) for name in _COLUMNS})

    def _to_model(self, entity: FollowupNote) -> FollowupNoteModel:
        values = {name: getattr(entity, name) for name in _COLUMNS if name != "id"}
        return FollowupNoteModel(**values)

    async def get_by_id(self, note_id: int) -> FollowupNote | None:
        result = await self._session.get(FollowupNoteModel, note_id)
        return self._to_entity(result) if result else None

    async def get_page(
        self, filters: FollowupNoteFilter, page: PageRequest
    ) -> Page[FollowupNote]:
        query = followup_note_query(filters, page)
        total = (await self._session.execute(query.count)).scalar_one()
        result = await self._session.execute(query.page)
        return Page(
            request=page,
            total=int(total),
            items=[self._to_entity(row) for row in result.scalars().all()],
        )

    async def create(self, note: FollowupNote) -> FollowupNote:
        model = self._to_model(note)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, note: FollowupNote) -> FollowupNote:
        model = await self._session.get(FollowupNoteModel, note.id)
        if model is None:
            raise ValueError(f"FollowupNote {note.id} not found in database")
        for name in _COLUMNS:
            if name != "id":
                setattr(model, name, getattr(note, name))
        await self._session.flush()
        return self._to_entity(model)

    async def count_by_day(
        self, filters: FollowupNoteFilter, start: datetime, end: datetime
    ) -> dict[date, int]:
        day = func.date(FollowupNoteModel.created_at)
        stmt = (
            select(day.label("day"), func.count().label("total"))
            .where(
                *followup_note_conditions(filters),
                FollowupNoteModel.created_at >= start,
                FollowupNoteModel.created_at < end,
            )
            .group_by(day)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return {_as_date(row.day): int(row.total) for row in result.all()}

    async def count_by_month(
        self, filters: FollowupNoteFilter, start: datetime, end: datetime
    ) -> dict[int, int]:
        month = extract("month", FollowupNoteModel.created_at)
        stmt = (
            select(month.label("month"), func.count().label("total"))
            .where(
                *followup_note_conditions(filters),
                FollowupNoteModel.created_at >= start,
                FollowupNoteModel.created_at < end,
            )
            .group_by(month)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return {int(row.month): int(row.total) for row in result.all()}
