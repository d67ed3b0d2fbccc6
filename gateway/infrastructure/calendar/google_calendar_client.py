"""Google Calendar v3 client — implements the CalendarProvider interface.

googleapiclient is synchronous, so every call runs in a worker thread and is
bounded by ``asyncio.wait_for``.
"""

import asyncio
import json
import logging
import threading
from collections.abc import Callable
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from gateway.application.interfaces import CalendarProvider
from gateway.domain.exceptions import UpstreamRequestError

logger = logging.getLogger(__name__)

PROVIDER = "google_calendar"

INIT_TIMEOUT_SECONDS = 8.0
READ_TIMEOUT_SECONDS = 10.0
WRITE_TIMEOUT_SECONDS = 15.0


def service_account_credentials(
    scopes: list[str],
    *,
    info_json: str = "",
    file_path: str = "",
) -> service_account.Credentials:
    """Build service-account credentials from inline JSON or a key file."""
    if info_json:
        return service_account.Credentials.from_service_account_info(
            json.loads(info_json), scopes=scopes
        )
    if file_path:
        return service_account.Credentials.from_service_account_file(file_path, scopes=scopes)
    raise UpstreamRequestError(
        PROVIDER,
        500,
        "Service-account auth requires GOOGLE_SERVICE_ACCOUNT_JSON or GOOGLE_SERVICE_ACCOUNT_FILE",
    )


class GoogleCalendarClient(CalendarProvider):
    """Infrastructure adapter — talks to the Google Calendar API.

    The discovery client is built once, on first use, and reused.
    """

    def __init__(self, credentials_factory: Callable[[], Any]):
        self._credentials_factory = credentials_factory
        self._service: Any = None
        self._lock = threading.Lock()

    def _build_service(self) -> Any:
        with self._lock:
            if self._service is None:
                credentials = self._credentials_factory()
                self._service = build(
                    "calendar", "v3", credentials=credentials, cache_discovery=False
                )
                logger.info("Google Calendar client initialised")
            return self._service

    async def _service_handle(self) -> Any:
        if self._service is not None:
            return self._service
        return await self._run(
            self._build_service, INIT_TIMEOUT_SECONDS, "initialising the calendar client"
        )

    async def _run(self, fn: Callable[[], Any], timeout: float, action: str) -> Any:
        try:
            return await asyncio.wait_for(asyncio.to_thread(fn), timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Google Calendar timeout while %s (%.0fs)", action, timeout)
            raise UpstreamRequestError(
                PROVIDER, 504, f"Google Calendar API timeout while {action}"
            ) from exc
        except HttpError as exc:
            status = int(getattr(exc.resp, "status", 500) or 500)
            body = exc.content.decode(errors="replace") if exc.content else str(exc)
            logger.warning("Google Calendar error while %s: %d", action, status)
            raise UpstreamRequestError(PROVIDER, status, body) from exc

    async def list_calendars(self) -> list[dict[str, Any]]:
        service = await self._service_handle()
        result = await self._run(
            lambda: service.calendarList().list().execute(),
            READ_TIMEOUT_SECONDS,
            "listing calendars",
        )
        return result.get("items", [])

    async def list_events(
        self,
        calendar_id: str,
        *,
        time_min: str | None = None,
        time_max: str | None = None,
    ) -> list[dict[str, Any]]:
        service = await self._service_handle()
        query: dict[str, Any] = {
            "calendarId": calendar_id,
            "singleEvents": True,
            "orderBy": "startTime",
        }
        if time_min:
            query["timeMin"] = time_min
        if time_max:
            query["timeMax"] = time_max

        result = await self._run(
            lambda: service.events().list(**query).execute(),
            READ_TIMEOUT_SECONDS,
            "checking availability",
        )
        return result.get("items", [])

    async def get_event(self, calendar_id: str, event_id: str) -> dict[str, Any]:
        service = await self._service_handle()
        return await self._run(
            lambda: service.events().get(calendarId=calendar_id, eventId=event_id).execute(),
            READ_TIMEOUT_SECONDS,
            "fetching an event",
        )

    async def insert_event(self, calendar_id: str, event: dict[str, Any]) -> dict[str, Any]:
        service = await self._service_handle()
        return await self._run(
            lambda: service.events()
            .insert(calendarId=calendar_id, body=event, sendUpdates="all")
            .execute(),
            WRITE_TIMEOUT_SECONDS,
            "creating event",
        )

    async def update_event(
        self, calendar_id: str, event_id: str, event: dict[str, Any]
    ) -> dict[str, Any]:
        service = await self._service_handle()
        return await self._run(
            lambda: service.events()
            .update(calendarId=calendar_id, eventId=event_id, body=event, sendUpdates="all")
            .execute(),
            WRITE_TIMEOUT_SECONDS,
            "updating event",
        )

    async def delete_event(self, calendar_id: str, event_id: str) -> None:
        service = await self._service_handle()
        await self._run(
            lambda: service.events()
            .delete(calendarId=calendar_id, eventId=event_id, sendUpdates="all")
            .execute(),
            WRITE_TIMEOUT_SECONDS,
            "deleting event",
        )
