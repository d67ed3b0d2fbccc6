"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gateway.config import get_settings
from gateway.infrastructure.database import Base, get_database_registry
from gateway.infrastructure.dependencies import close_clients
from gateway.infrastructure.logging.colored_logger import RequestLogger
from gateway.infrastructure.logging.log_config import setup_logging
from gateway.presentation.api.errors import register_error_handlers
from gateway.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    """Create the tables on the default database (tenant databases are provisioned externally)."""
    engine = get_database_registry().engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, release pools on exit."""
    settings = get_settings()
    setup_logging()

    if settings.auto_create_tables:
        try:
            await _create_tables()
        except Exception:
            logger.exception("Failed to create database tables — continuing without them")

    yield

    # Shutdown
    await close_clients()
    await get_database_registry().dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One colored log line per request
    app.middleware("http")(RequestLogger().middleware)

    register_error_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gateway.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
