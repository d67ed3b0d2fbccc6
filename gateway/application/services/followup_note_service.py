"""Application service (use case) for client follow-up notes and their stats."""

import asyncio
import logging
from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone

from gateway.application.interfaces import FollowupNoteRepository
from gateway.application.schemas.followup_note import (
    FollowupNoteCreate,
    FollowupNoteDeactivate,
    FollowupNoteUpdate,
)
from gateway.domain.entities import (
    AuditActor,
    FollowupNote,
    FollowupNoteFilter,
    FollowupNoteStats,
    Page,
    PageRequest,
)
from gateway.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

DAILY_WINDOW_DAYS = 30
TODAY_LABEL = "Today"

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MONTH_ABBR = tuple(name[:3] for name in _MONTH_NAMES)

_AUDIT_FIELDS = {"updated_by_user_id", "updated_by_user_name", "updated_by_user_image"}
_CLEARABLE_FIELDS = frozenset({"tag", "file_url"})


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _day_label(day: date, today: date) -> str:
    if day == today:
        return TODAY_LABEL
    return f"{_MONTH_ABBR[day.month - 1]} {day.day}"


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class FollowupNoteService:
    """Orchestrates follow-up note CRUD and the daily/monthly stats."""

    def __init__(
        self,
        repository: FollowupNoteRepository,
        max_page_limit: int = 20,
        today: Callable[[], date] = _utc_today,
    ):
        self._repository = repository
        self._max_page_limit = max_page_limit
        self._today = today

    async def get_note(self, note_id: int) -> FollowupNote:
        note = await self._repository.get_by_id(note_id)
        if note is None:
            raise EntityNotFoundError("FollowupNote", note_id)
        return note

    async def list_notes(
        self, filters: FollowupNoteFilter, page: PageRequest
    ) -> Page[FollowupNote]:
        return await self._repository.get_page(filters, page.clamped(self._max_page_limit))

    async def create_note(self, data: FollowupNoteCreate) -> FollowupNote:
        note = FollowupNote(**data.model_dump())
        created = await self._repository.create(note)
        logger.info("Created follow-up note %s for client %s", created.id, created.client_id)
        return created

    async def update_note(self, note_id: int, data: FollowupNoteUpdate) -> FollowupNote:
        note = await self.get_note(note_id)
        changes = {
            name: value
            for name, value in data.model_dump(exclude_unset=True, exclude=_AUDIT_FIELDS).items()
            if value is not None or name in _CLEARABLE_FIELDS
        }
        note.apply_changes(
            changes,
            AuditActor(
                id=data.updated_by_user_id,
                name=data.updated_by_user_name,
                image=data.updated_by_user_image,
            ),
        )
        return await self._repository.update(note)

    async def deactivate_note(
        self, note_id: int, data: FollowupNoteDeactivate | None = None
    ) -> FollowupNote:
        """Soft-delete: notes carry no active flag, so this only re-stamps the updater."""
        note = await self.get_note(note_id)
        data = data or FollowupNoteDeactivate()
        note.touch(
            AuditActor(
                id=data.updated_by_user_id,
                name=data.updated_by_user_name,
                image=data.updated_by_user_image,
            )
        )
        return await self._repository.update(note)

    async def get_stats(self, filters: FollowupNoteFilter) -> FollowupNoteStats:
        """Dense per-day counts for the trailing 30 days and per-month counts for this year."""
        filters = filters.without_date_range()
        today = self._today()

        window_start = _midnight(today - timedelta(days=DAILY_WINDOW_DAYS - 1))
        window_end = _midnight(today + timedelta(days=1))
        year_start = _midnight(date(today.year, 1, 1))
        year_end = _midnight(date(today.year + 1, 1, 1))

        by_day, by_month = await asyncio.gather(
            self._repository.count_by_day(filters, window_start, window_end),
            self._repository.count_by_month(filters, year_start, year_end),
        )

        daily: dict[str, int] = {}
        for offset in range(DAILY_WINDOW_DAYS):
            day = today - timedelta(days=offset)
            daily[_day_label(day, today)] = by_day.get(day, 0)

        monthly = {
            name: by_month.get(number, 0)
            for number, name in enumerate(_MONTH_NAMES, start=1)
        }
        return FollowupNoteStats(daily=daily, monthly=monthly)
