"""Abstract repository interface (port) for FollowupNote persistence."""

from abc import ABC, abstractmethod
from datetime import date, datetime

from gateway.domain.entities import FollowupNote, FollowupNoteFilter, Page, PageRequest


class FollowupNoteRepository(ABC):
    """Port for client follow-up note persistence."""

    @abstractmethod
    async def get_by_id(self, note_id: int) -> FollowupNote | None:
        ...

    @abstractmethod
    async def get_page(
        self, filters: FollowupNoteFilter, page: PageRequest
    ) -> Page[FollowupNote]:
        """Retrieve one page of matching notes plus the total match count."""
        ...

    @abstractmethod
    async def create(self, note: FollowupNote) -> FollowupNote:
        ...

    @abstractmethod
    async def update(self, note: FollowupNote) -> FollowupNote:
        ...

    @abstractmethod
    async def count_by_day(
        self, filters: FollowupNoteFilter, start: datetime, end: datetime
    ) -> dict[date, int]:
        """Count matching notes per calendar day with ``start <= created_at < end``.

        Days without notes are absent from the result.
        """
        ...

    @abstractmethod
    async def count_by_month(
        self, filters: FollowupNoteFilter, start: datetime, end: datetime
    ) -> dict[int, int]:
        """Count matching notes per month number (1-12) with ``start <= created_at < end``."""
        ...
