"""Shared fixtures: a throwaway SQLite database and an app wired to it."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from gateway.domain.exceptions import TenantNotFoundError
from gateway.infrastructure.database import Base
from gateway.infrastructure.dependencies import (
    get_tenant_session_factory,
    require_tenant_session_factory,
)
from gateway.main import create_app


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """A fresh SQLite file per test; concurrent sessions each get their own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'gateway.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    """The real application with both tenant lookups pointed at the test database.

    ``require_tenant_session_factory`` still insists on a ``ref``.
    """
    application = create_app()

    def _tenant_factory(ref: str | None = None):
        return session_factory

    def _required_factory(ref: str | None = None):
        if not ref:
            raise TenantNotFoundError(ref)
        return session_factory

    application.dependency_overrides[get_tenant_session_factory] = _tenant_factory
    application.dependency_overrides[require_tenant_session_factory] = _required_factory
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
