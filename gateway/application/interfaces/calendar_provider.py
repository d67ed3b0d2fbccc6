"""Abstract calendar provider interface — port for external calendar APIs."""

from abc import ABC, abstractmethod
from typing import Any


class CalendarProvider(ABC):
    """Port — calendar operations needed by the booking service.

    Events are plain provider-shaped dicts (Google Calendar v3 resources).
    """

    @abstractmethod
    async def list_calendars(self) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def list_events(
        self,
        calendar_id: str,
        *,
        time_min: str | None = None,
        time_max: str | None = None,
    ) -> list[dict[str, Any]]:
        """Single (expanded) events ordered by start time within the window."""
        ...

    @abstractmethod
    async def get_event(self, calendar_id: str, event_id: str) -> dict[str, Any]:
        ...

    @abstractmethod
    async def insert_event(self, calendar_id: str, event: dict[str, Any]) -> dict[str, Any]:
        """Create an event and notify attendees."""
        ...

    @abstractmethod
    async def update_event(
        self, calendar_id: str, event_id: str, event: dict[str, Any]
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def delete_event(self, calendar_id: str, event_id: str) -> None:
        ...
