"""User, role and token endpoints proxied to the identity provider."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from gateway.application.schemas import (
    ApiResponse,
    CreateRoleRequest,
    CreateUserRequest,
    RoleUsersRequest,
    TokenResponse,
    UpdateRoleRequest,
    UpdateUserRequest,
    UserRolesRequest,
)
from gateway.application.services import IdentityService
from gateway.infrastructure.dependencies import get_identity_service

auth_router = APIRouter(prefix="/auth", tags=["Auth"])
users_router = APIRouter(prefix="/users", tags=["Users"])
roles_router = APIRouter(prefix="/roles", tags=["Roles"])

_ENVELOPE = {"response_model": ApiResponse[Any], "response_model_exclude_unset": True}


# ── Token ────────────────────────────────────────────────────────────

@auth_router.post("/token", response_model=TokenResponse)
async def refresh_token(
    service: IdentityService = Depends(get_identity_service),
) -> TokenResponse:
    """Discard the cached management token and fetch a new one."""
    token = await service.refresh_token()
    return TokenResponse(success=True, access_token=token, token_type="Bearer")


# ── Users ────────────────────────────────────────────────────────────

@users_router.get("", **_ENVELOPE)
async def list_users(
    page: int = Query(0, ge=0),
    per_page: int = Query(50, ge=1, le=100),
    search: str | None = Query(None, description="Lucene query forwarded as `q`"),
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    users = await service.list_users(page=page, per_page=per_page, search=search)
    return ApiResponse(success=True, data=users)


@users_router.post("", status_code=status.HTTP_201_CREATED, **_ENVELOPE)
async def create_user(
    data: CreateUserRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    user = await service.create_user(data)
    return ApiResponse(success=True, data=user)


@users_router.patch("/{user_id}", **_ENVELOPE)
async def update_user(
    user_id: str,
    data: UpdateUserRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    user = await service.update_user(user_id, data)
    return ApiResponse(success=True, data=user)


@users_router.get("/{user_id}/roles", **_ENVELOPE)
async def get_user_roles(
    user_id: str,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    roles = await service.get_user_roles(user_id)
    return ApiResponse(success=True, data=roles)


@users_router.post("/{user_id}/roles", **_ENVELOPE)
async def assign_roles(
    user_id: str,
    data: UserRolesRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    result = await service.assign_roles_to_user(user_id, data.roles)
    return ApiResponse(success=True, data=result, message="Roles assigned")


@users_router.delete("/{user_id}/roles", **_ENVELOPE)
async def remove_roles(
    user_id: str,
    data: UserRolesRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    result = await service.remove_roles_from_user(user_id, data.roles)
    return ApiResponse(success=True, data=result, message="Roles removed")


# ── Roles ────────────────────────────────────────────────────────────

@roles_router.get("", **_ENVELOPE)
async def list_roles(
    page: int = Query(0, ge=0),
    per_page: int = Query(50, ge=1, le=100),
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    roles = await service.list_roles(page=page, per_page=per_page)
    return ApiResponse(success=True, data=roles)


@roles_router.post("", status_code=status.HTTP_201_CREATED, **_ENVELOPE)
async def create_role(
    data: CreateRoleRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    role = await service.create_role(data)
    return ApiResponse(success=True, data=role)


@roles_router.patch("/{role_id}", **_ENVELOPE)
async def update_role(
    role_id: str,
    data: UpdateRoleRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    role = await service.update_role(role_id, data)
    return ApiResponse(success=True, data=role)


@roles_router.get("/{role_id}/users", **_ENVELOPE)
async def get_role_users(
    role_id: str,
    page: int = Query(0, ge=0),
    per_page: int = Query(50, ge=1, le=100),
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    users = await service.get_role_users(role_id, page=page, per_page=per_page)
    return ApiResponse(success=True, data=users)


@roles_router.post("/{role_id}/users", **_ENVELOPE)
async def assign_users(
    role_id: str,
    data: RoleUsersRequest,
    service: IdentityService = Depends(get_identity_service),
) -> ApiResponse[Any]:
    result = await service.assign_users_to_role(role_id, data.users)
    return ApiResponse(success=True, data=result, message="Users assigned")
