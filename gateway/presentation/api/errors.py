"""Exception handlers: every failure becomes ``{success: false, error, message}``."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.domain.exceptions import (
    EntityNotFoundError,
    InvalidRequestError,
    SlotUnavailableError,
    TenantNotFoundError,
    UpstreamAuthError,
    UpstreamRequestError,
)

logger = logging.getLogger(__name__)

_REASONS = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def error_response(
    status_code: int, message: str | None, *, data: Any = None
) -> JSONResponse:
    body: dict[str, Any] = {
        "success": False,
        "error": _REASONS.get(status_code, "Error"),
        "message": message,
    }
    if data is not None:
        body["data"] = data
    return JSONResponse(status_code=status_code, content=body)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register the envelope handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(InvalidRequestError)
    async def invalid_request(request: Request, exc: InvalidRequestError) -> JSONResponse:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(EntityNotFoundError)
    async def entity_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(TenantNotFoundError)
    async def tenant_not_found(request: Request, exc: TenantNotFoundError) -> JSONResponse:
        # Indistinguishable from an unknown route.
        return error_response(status.HTTP_404_NOT_FOUND, "Not Found")

    @app.exception_handler(SlotUnavailableError)
    async def slot_unavailable(request: Request, exc: SlotUnavailableError) -> JSONResponse:
        return error_response(
            status.HTTP_409_CONFLICT,
            str(exc),
            data={"conflictingEvents": exc.conflicting_events},
        )

    @app.exception_handler(UpstreamAuthError)
    async def upstream_auth(request: Request, exc: UpstreamAuthError) -> JSONResponse:
        logger.error("Upstream auth failure on %s: %s", request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(UpstreamRequestError)
    async def upstream_request(request: Request, exc: UpstreamRequestError) -> JSONResponse:
        logger.error("Upstream failure on %s: %s", request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(SQLAlchemyError)
    async def database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database failure on %s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else None
        return error_response(exc.status_code, message)

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)
