"""Pydantic DTOs for the identity provider proxy (users, roles, tokens).

Request bodies are open mappings: declared fields are validated, anything
else is forwarded to the upstream untouched.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Body for ``POST /users``."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", examples=["user@example.com"])
    password: str = Field(..., min_length=8)
    connection: str = Field(..., min_length=1, examples=["Username-Password-Authentication"])
    user_metadata: dict[str, Any] | None = None
    app_metadata: dict[str, Any] | None = None


class UpdateUserRequest(BaseModel):
    """Body for ``PATCH /users/{id}`` — every field optional."""

    model_config = ConfigDict(extra="allow")

    email: str | None = Field(None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str | None = Field(None, min_length=8)
    user_metadata: dict[str, Any] | None = None
    app_metadata: dict[str, Any] | None = None


class UserRolesRequest(BaseModel):
    """Role ids to assign to or remove from a user."""

    roles: list[str] = Field(..., min_length=1)


class CreateRoleRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class UpdateRoleRequest(BaseModel):
    name: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)


class RoleUsersRequest(BaseModel):
    """User ids to assign to a role."""

    users: list[str] = Field(..., min_length=1)


class TokenResponse(BaseModel):
    success: bool = True
    access_token: str
    token_type: str = "Bearer"
