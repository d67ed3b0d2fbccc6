"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gateway.config import get_settings
from gateway.application.interfaces import CalendarProvider, IdentityProvider
from gateway.application.services import (
    CalendarService,
    FollowupNoteService,
    IdentityService,
    WarrantyService,
)
from gateway.domain.exceptions import TenantNotFoundError
from gateway.infrastructure.calendar import GoogleCalendarClient, service_account_credentials
from gateway.infrastructure.database.repositories import (
    SQLAlchemyFollowupNoteRepository,
    SQLAlchemyWarrantyRepository,
)
from gateway.infrastructure.database.session import get_database_registry, session_scope
from gateway.infrastructure.identity import (
    AccessTokenCache,
    Auth0ManagementClient,
    ManagementTokenClient,
)

_REF_DESCRIPTION = "Tenant database reference"


# ── Tenant databases ─────────────────────────────────────────────────

def get_tenant_session_factory(
    ref: str | None = Query(None, description=_REF_DESCRIPTION),
) -> async_sessionmaker[AsyncSession]:
    """Session factory for ``?ref=`` or, when absent, the default database."""
    return get_database_registry().session_factory(ref)


def require_tenant_session_factory(
    ref: str | None = Query(None, description=_REF_DESCRIPTION),
) -> async_sessionmaker[AsyncSession]:
    """Session factory for a mandatory ``?ref=``."""
    if not ref:
        raise TenantNotFoundError(ref)
    return get_database_registry().session_factory(ref)


async def get_warranty_service(
    factory: async_sessionmaker[AsyncSession] = Depends(get_tenant_session_factory),
) -> AsyncGenerator[WarrantyService, None]:
    """Provides a WarrantyService bound to one request-scoped session.

    Endpoints depend on it with ``scope="function"`` so the commit runs
    before the response is sent and a failed commit becomes a 500.
    """
    async with session_scope(factory) as session:
        repository = SQLAlchemyWarrantyRepository(session)
        yield WarrantyService(repository, max_page_limit=get_settings().max_page_limit)


async def get_followup_note_service(
    factory: async_sessionmaker[AsyncSession] = Depends(require_tenant_session_factory),
) -> AsyncGenerator[FollowupNoteService, None]:
    """Provides a FollowupNoteService; stats queries get their own sessions from ``factory``."""
    async with session_scope(factory) as session:
        repository = SQLAlchemyFollowupNoteRepository(session, factory)
        yield FollowupNoteService(repository, max_page_limit=get_settings().max_page_limit)


# ── Identity provider ────────────────────────────────────────────────

_http_client: httpx.AsyncClient | None = None
_identity_provider: Auth0ManagementClient | None = None
_calendar_provider: GoogleCalendarClient | None = None


def _get_http_client() -> httpx.AsyncClient:
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(timeout=get_settings().identity_timeout_seconds)
    return _http_client


def get_identity_provider() -> IdentityProvider:
    """One management client (and one token cache) per process."""
    global _identity_provider
    if _identity_provider is None:
        settings = get_settings()
        http_client = _get_http_client()
        token_client = ManagementTokenClient(
            settings.identity_base_url,
            settings.identity_client_id,
            settings.identity_client_secret,
            settings.identity_audience,
            token_path=settings.identity_token_path,
            grant_type=settings.identity_grant_type,
            http_client=http_client,
        )
        token_cache = AccessTokenCache(
            token_client.fetch,
            safety_margin=settings.token_safety_margin_seconds,
            default_lifetime=settings.token_default_lifetime_seconds,
        )
        _identity_provider = Auth0ManagementClient(
            settings.identity_base_url,
            token_cache,
            api_path=settings.identity_api_path,
            http_client=http_client,
        )
    return _identity_provider


def get_identity_service(
    provider: IdentityProvider = Depends(get_identity_provider),
) -> IdentityService:
    return IdentityService(provider)


# ── Calendar ─────────────────────────────────────────────────────────

def get_calendar_provider() -> CalendarProvider:
    global _calendar_provider
    if _calendar_provider is None:
        settings = get_settings()
        _calendar_provider = GoogleCalendarClient(
            lambda: service_account_credentials(
                settings.calendar_scopes,
                info_json=settings.google_service_account_json,
                file_path=settings.google_service_account_file,
            )
        )
    return _calendar_provider


def get_calendar_service(
    provider: CalendarProvider = Depends(get_calendar_provider),
) -> CalendarService:
    settings = get_settings()
    return CalendarService(
        provider,
        default_calendar_id=settings.calendar_default_id,
        timezone_name=settings.calendar_timezone,
        appointment_minutes=settings.calendar_appointment_minutes,
    )


async def close_clients() -> None:
    """Release the shared outbound HTTP client (application shutdown)."""
    global _http_client, _identity_provider
    if _http_client is not None:
        await _http_client.aclose()
    _http_client = None
    _identity_provider = None
