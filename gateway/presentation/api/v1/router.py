"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from gateway.presentation.api.v1.endpoints.health import router as health_router
from gateway.presentation.api.v1.endpoints.identity import (
    auth_router,
    roles_router,
    users_router,
)
from gateway.presentation.api.v1.endpoints.warranties import router as warranties_router
from gateway.presentation.api.v1.endpoints.followup_notes import router as followup_notes_router
from gateway.presentation.api.v1.endpoints.calendar import router as calendar_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(roles_router)
router.include_router(warranties_router)
router.include_router(followup_notes_router)
router.include_router(calendar_router)
