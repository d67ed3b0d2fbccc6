"""Unit tests for the FollowupNoteService, including the stats aggregation."""

import copy
from datetime import date, datetime, timezone

import pytest

from gateway.application.interfaces import FollowupNoteRepository
from gateway.application.schemas import (
    FollowupNoteCreate,
    FollowupNoteDeactivate,
    FollowupNoteUpdate,
)
from gateway.application.services import FollowupNoteService
from gateway.domain.entities import FollowupNote, FollowupNoteFilter, Page, PageRequest
from gateway.domain.exceptions import EntityNotFoundError


# ── Helpers ──


class _InMemoryNoteRepository(FollowupNoteRepository):
    def __init__(self):
        self.rows: dict[int, FollowupNote] = {}
        self.day_counts: dict[date, int] = {}
        self.month_counts: dict[int, int] = {}
        self.stats_calls: list[tuple] = []

    async def get_by_id(self, note_id: int) -> FollowupNote | None:
        row = self.rows.get(note_id)
        return copy.deepcopy(row) if row else None

    async def get_page(self, filters, page: PageRequest) -> Page[FollowupNote]:
        items = list(self.rows.values())
        return Page(request=page, total=len(items), items=items)

    async def create(self, note: FollowupNote) -> FollowupNote:
        note.id = len(self.rows) + 1
        self.rows[note.id] = copy.deepcopy(note)
        return note

    async def update(self, note: FollowupNote) -> FollowupNote:
        self.rows[note.id] = copy.deepcopy(note)
        return note

    async def count_by_day(self, filters, start, end):
        self.stats_calls.append(("day", filters, start, end))
        return dict(self.day_counts)

    async def count_by_month(self, filters, start, end):
        self.stats_calls.append(("month", filters, start, end))
        return dict(self.month_counts)


def _create_payload(**overrides) -> FollowupNoteCreate:
    data = {
        "title": "Called client",
        "description": "Left a voicemail",
        "client_id": "c1",
        "created_by_user_id": "u1",
        "created_by_user_name": "Ann",
    }
    data.update(overrides)
    return FollowupNoteCreate(**data)


TODAY = date(2026, 10, 19)


@pytest.fixture
def repository():
    return _InMemoryNoteRepository()


@pytest.fixture
def service(repository):
    return FollowupNoteService(repository, today=lambda: TODAY)


# ── CRUD ──


@pytest.mark.asyncio
async def test_create_seeds_updater_from_creator(service):
    note = await service.create_note(_create_payload(created_by_user_image="ann.png"))

    assert note.id == 1
    assert note.updated_by_user_id == "u1"
    assert note.updated_by_user_name == "Ann"
    assert note.updated_by_user_image == "ann.png"
    assert note.updated_at == note.created_at


@pytest.mark.asyncio
async def test_update_applies_present_fields_and_restamps(service):
    note = await service.create_note(_create_payload(tag="call"))
    before = note.updated_at

    updated = await service.update_note(
        note.id,
        FollowupNoteUpdate(title="Visited client", updated_by_user_id="u2", updated_by_user_name="Bob"),
    )

    assert updated.title == "Visited client"
    assert updated.description == "Left a voicemail"
    assert updated.tag == "call"
    assert updated.updated_by_user_id == "u2"
    assert updated.updated_at >= before


@pytest.mark.asyncio
async def test_deactivate_only_touches_audit(service, repository):
    note = await service.create_note(_create_payload())

    touched = await service.deactivate_note(note.id, FollowupNoteDeactivate(updated_by_user_name="Bob"))

    assert touched.updated_by_user_name == "Bob"
    assert touched.updated_by_user_id == "u1"
    assert touched.title == note.title
    assert note.id in repository.rows


@pytest.mark.asyncio
async def test_get_missing_raises_not_found(service):
    with pytest.raises(EntityNotFoundError):
        await service.get_note(7)


# ── Stats ──


@pytest.mark.asyncio
async def test_stats_are_dense_when_there_are_no_notes(service):
    stats = await service.get_stats(FollowupNoteFilter())

    assert len(stats.daily) == 30
    assert set(stats.daily.values()) == {0}
    assert list(stats.monthly) == [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]
    assert set(stats.monthly.values()) == {0}


@pytest.mark.asyncio
async def test_daily_labels_run_newest_first(service, repository):
    repository.day_counts = {TODAY: 2, date(2026, 10, 18): 1, date(2026, 9, 20): 4}
    repository.month_counts = {10: 3, 9: 4}

    stats = await service.get_stats(FollowupNoteFilter())

    labels = list(stats.daily)
    assert labels[0] == "Today"
    assert labels[1] == "Oct 18"
    assert labels[-1] == "Sep 20"
    assert stats.daily["Today"] == 2
    assert stats.daily["Oct 18"] == 1
    assert stats.daily["Sep 20"] == 4
    assert stats.monthly["October"] == 3
    assert stats.monthly["September"] == 4


@pytest.mark.asyncio
async def test_stats_windows_and_date_range_is_ignored(service, repository):
    filters = FollowupNoteFilter(
        client_id="c1",
        date_start=datetime(2020, 1, 1, tzinfo=timezone.utc),
        date_end=datetime(2020, 12, 31, tzinfo=timezone.utc),
    )

    await service.get_stats(filters)

    calls = {kind: (f, start, end) for kind, f, start, end in repository.stats_calls}
    day_filters, day_start, day_end = calls["day"]
    assert day_filters.client_id == "c1"
    assert day_filters.date_start is None and day_filters.date_end is None
    assert day_start == datetime(2026, 9, 20, tzinfo=timezone.utc)
    assert day_end == datetime(2026, 10, 20, tzinfo=timezone.utc)

    _, year_start, year_end = calls["month"]
    assert year_start == datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert year_end == datetime(2027, 1, 1, tzinfo=timezone.utc)
