"""SQLAlchemy engines and session factories, one pair per tenant database."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gateway.config import Settings, get_settings
from gateway.domain.exceptions import TenantNotFoundError

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class DatabaseRegistry:
    """Lazily builds and caches an engine + session factory per tenant ref.

    ``None`` is the default database (``database_url``). Any other key is a
    tenant ref, resolved to ``tenant_database_base + ref + ":" + password +
    tenant_database_host``.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._engines: dict[str | None, AsyncEngine] = {}
        self._factories: dict[str | None, async_sessionmaker[AsyncSession]] = {}

    def url_for(self, ref: str | None) -> str:
        if ref is None:
            return self._settings.database_url
        if not self._settings.db_ref_enabled:
            raise TenantNotFoundError(ref)
        if not ref or not self._settings.tenant_database_base:
            raise TenantNotFoundError(ref)
        s = self._settings
        return f"{s.tenant_database_base}{ref}:{s.tenant_database_password}{s.tenant_database_host}"

    def engine(self, ref: str | None = None) -> AsyncEngine:
        if ref not in self._engines:
            url = _get_async_url(self.url_for(ref))
            self._engines[ref] = create_async_engine(
                url,
                echo=self._settings.sql_echo,
                future=True,
            )
            logger.info("Created database engine for %s", ref or "default database")
        return self._engines[ref]

    def session_factory(self, ref: str | None = None) -> async_sessionmaker[AsyncSession]:
        if ref not in self._factories:
            self._factories[ref] = async_sessionmaker(
                self.engine(ref),
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._factories[ref]

    async def dispose(self) -> None:
        """Dispose every engine created so far (application shutdown)."""
        for ref, engine in list(self._engines.items()):
            await engine.dispose()
            logger.debug("Disposed database engine for %s", ref or "default database")
        self._engines.clear()
        self._factories.clear()


_registry: DatabaseRegistry | None = None


def get_database_registry() -> DatabaseRegistry:
    """Process-wide registry built from the cached settings."""
    global _registry
    if _registry is None:
        _registry = DatabaseRegistry(get_settings())
    return _registry


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Yields one session; commits on success, rolls back on error."""
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
