"""Application service for user and role management through the identity provider."""

import logging
from typing import Any
from urllib.parse import quote

from gateway.application.interfaces import IdentityProvider
from gateway.application.schemas.identity import (
    CreateRoleRequest,
    CreateUserRequest,
    UpdateRoleRequest,
    UpdateUserRequest,
)

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    # Auth0 user ids contain "|" (e.g. "auth0|abc"); keep them in one path segment.
    return quote(value, safe="")


class IdentityService:
    """Thin use-case layer over the IdentityProvider port.

    Bodies are forwarded as open mappings; only what the upstream strictly
    requires is validated by the request schemas.
    """

    def __init__(self, provider: IdentityProvider):
        self._provider = provider

    async def refresh_token(self) -> str:
        """Drop the cached token and fetch a fresh one."""
        return await self._provider.access_token(force_refresh=True)

    # ── Users ────────────────────────────────────────────────────────

    async def list_users(self, page: int = 0, per_page: int = 50, search: str | None = None) -> Any:
        params: dict[str, Any] = {"page": page, "per_page": per_page}
        if search:
            params["q"] = search
        return await self._provider.request("GET", "users", params=params)

    async def create_user(self, data: CreateUserRequest) -> Any:
        return await self._provider.request(
            "POST", "users", json=data.model_dump(exclude_unset=True)
        )

    async def update_user(self, user_id: str, data: UpdateUserRequest) -> Any:
        return await self._provider.request(
            "PATCH", f"users/{_segment(user_id)}", json=data.model_dump(exclude_unset=True)
        )

    async def get_user_roles(self, user_id: str) -> Any:
        return await self._provider.request("GET", f"users/{_segment(user_id)}/roles")

    async def assign_roles_to_user(self, user_id: str, roles: list[str]) -> Any:
        logger.info("Assigning %d role(s) to user %s", len(roles), user_id)
        return await self._provider.request(
            "POST",
            f"users/{_segment(user_id)}/roles",
            json={"roles": roles},
            no_content={"roles": roles},
        )

    async def remove_roles_from_user(self, user_id: str, roles: list[str]) -> Any:
        logger.info("Removing %d role(s) from user %s", len(roles), user_id)
        return await self._provider.request(
            "DELETE",
            f"users/{_segment(user_id)}/roles",
            json={"roles": roles},
            no_content={"roles": roles},
        )

    # ── Roles ────────────────────────────────────────────────────────

    async def list_roles(self, page: int = 0, per_page: int = 50) -> Any:
        return await self._provider.request(
            "GET", "roles", params={"page": page, "per_page": per_page}
        )

    async def create_role(self, data: CreateRoleRequest) -> Any:
        return await self._provider.request("POST", "roles", json=data.model_dump())

    async def update_role(self, role_id: str, data: UpdateRoleRequest) -> Any:
        return await self._provider.request(
            "PATCH", f"roles/{_segment(role_id)}", json=data.model_dump(exclude_unset=True)
        )

    async def get_role_users(self, role_id: str, page: int = 0, per_page: int = 50) -> Any:
        return await self._provider.request(
            "GET",
            f"roles/{_segment(role_id)}/users",
            params={"page": page, "per_page": per_page},
        )

    async def assign_users_to_role(self, role_id: str, users: list[str]) -> Any:
        return await self._provider.request(
            "POST",
            f"roles/{_segment(role_id)}/users",
            json={"users": users},
            no_content={"users": users},
        )
