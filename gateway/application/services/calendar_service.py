"""Application service for the calendar booking proxy."""

import logging
from datetime import datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

from gateway.application.interfaces import CalendarProvider
from gateway.application.schemas.calendar import BookEventRequest, UpdateEventRequest
from gateway.domain.exceptions import InvalidRequestError, SlotUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Appointment"


class CalendarService:
    """Books appointments after a naive overlap check against existing events."""

    def __init__(
        self,
        provider: CalendarProvider,
        *,
        default_calendar_id: str = "primary",
        timezone_name: str = "UTC",
        appointment_minutes: int = 30,
    ):
        self._provider = provider
        self._default_calendar_id = default_calendar_id
        self._timezone_name = timezone_name
        self._tz = ZoneInfo(timezone_name)
        self._appointment = timedelta(minutes=appointment_minutes)

    def parse_datetime(self, value: str) -> datetime:
        """Parse ISO-8601; a value without offset is local time in the configured zone."""
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidRequestError(f"Invalid datetime: {value!r}") from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self._tz)
        return parsed

    def _window(self, start: str, end: str | None) -> tuple[datetime, datetime]:
        start_at = self.parse_datetime(start)
        end_at = self.parse_datetime(end) if end else start_at + self._appointment
        if end_at <= start_at:
            raise InvalidRequestError("endDateTime must be after startDateTime")
        return start_at, end_at

    async def list_calendars(self) -> list[dict[str, Any]]:
        return await self._provider.list_calendars()

    async def list_events(
        self,
        calendar_id: str | None = None,
        time_min: str | None = None,
        time_max: str | None = None,
    ) -> list[dict[str, Any]]:
        return await self._provider.list_events(
            calendar_id or self._default_calendar_id,
            time_min=self.parse_datetime(time_min).isoformat() if time_min else None,
            time_max=self.parse_datetime(time_max).isoformat() if time_max else None,
        )

    async def get_event(self, event_id: str, calendar_id: str | None = None) -> dict[str, Any]:
        return await self._provider.get_event(calendar_id or self._default_calendar_id, event_id)

    async def check_availability(
        self, start: str, end: str | None = None, calendar_id: str | None = None
    ) -> list[dict[str, Any]]:
        """Return the events overlapping the slot; an empty list means available."""
        start_at, end_at = self._window(start, end)
        return await self._provider.list_events(
            calendar_id or self._default_calendar_id,
            time_min=start_at.isoformat(),
            time_max=end_at.isoformat(),
        )

    async def book(self, data: BookEventRequest) -> dict[str, Any]:
        start_at, end_at = self._window(data.startDateTime, data.endDateTime)

        conflicts = await self._provider.list_events(
            data.calendarId,
            time_min=start_at.isoformat(),
            time_max=end_at.isoformat(),
        )
        if conflicts:
            logger.info(
                "Slot %s–%s on %s is busy (%d event(s))",
                start_at.isoformat(), end_at.isoformat(), data.calendarId, len(conflicts),
            )
            raise SlotUnavailableError(data.calendarId, conflicts)

        event: dict[str, Any] = {
            "summary": data.summary or DEFAULT_SUMMARY,
            "start": {"dateTime": start_at.isoformat(), "timeZone": self._timezone_name},
            "end": {"dateTime": end_at.isoformat(), "timeZone": self._timezone_name},
        }
        if data.description:
            event["description"] = data.description
        if data.location:
            event["location"] = data.location
        if data.attendees:
            event["attendees"] = [a.model_dump() for a in data.attendees]

        created = await self._provider.insert_event(data.calendarId, event)
        logger.info("Booked event %s on %s", created.get("id"), data.calendarId)
        return created

    async def update_event(self, event_id: str, data: UpdateEventRequest) -> dict[str, Any]:
        calendar_id = data.calendarId or self._default_calendar_id
        event = dict(await self._provider.get_event(calendar_id, event_id))

        if data.summary:
            event["summary"] = data.summary
        if data.description:
            event["description"] = data.description
        if data.location:
            event["location"] = data.location
        if data.attendees:
            event["attendees"] = [a.model_dump() for a in data.attendees]
        if data.startDateTime:
            event["start"] = {
                "dateTime": self.parse_datetime(data.startDateTime).isoformat(),
                "timeZone": self._timezone_name,
            }
        if data.endDateTime:
            event["end"] = {
                "dateTime": self.parse_datetime(data.endDateTime).isoformat(),
                "timeZone": self._timezone_name,
            }

        return await self._provider.update_event(calendar_id, event_id, event)

    async def delete_event(self, event_id: str, calendar_id: str | None = None) -> None:
        await self._provider.delete_event(calendar_id or self._default_calendar_id, event_id)
