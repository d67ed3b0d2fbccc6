"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from gateway.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "success": True,
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
