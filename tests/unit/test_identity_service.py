"""Unit tests for the IdentityService (with a recording provider)."""

import pytest

from gateway.application.interfaces import IdentityProvider
from gateway.application.schemas import CreateUserRequest, UpdateRoleRequest
from gateway.application.services import IdentityService


class _RecordingProvider(IdentityProvider):
    def __init__(self, answer=None):
        self.calls: list[dict] = []
        self.answer = answer if answer is not None else {}
        self.refreshed = False

    async def request(self, method, path, *, params=None, json=None, no_content=None):
        self.calls.append({
            "method": method,
            "path": path,
            "params": params,
            "json": json,
            "no_content": no_content,
        })
        return self.answer

    async def access_token(self, *, force_refresh: bool = False) -> str:
        self.refreshed = force_refresh
        return "fresh-token"


@pytest.mark.asyncio
async def test_list_users_maps_search_to_q():
    provider = _RecordingProvider(answer=[])
    service = IdentityService(provider)

    await service.list_users(search='email:"a@b.co"')

    call = provider.calls[0]
    assert call["path"] == "users"
    assert call["params"] == {"page": 0, "per_page": 50, "q": 'email:"a@b.co"'}


@pytest.mark.asyncio
async def test_create_user_forwards_extra_fields():
    provider = _RecordingProvider()
    service = IdentityService(provider)

    await service.create_user(
        CreateUserRequest(
            email="a@b.co",
            password="longenough",
            connection="Username-Password-Authentication",
            given_name="Ann",
        )
    )

    body = provider.calls[0]["json"]
    assert body["given_name"] == "Ann"
    assert "user_metadata" not in body


@pytest.mark.asyncio
async def test_user_id_is_kept_in_one_path_segment():
    provider = _RecordingProvider()
    service = IdentityService(provider)

    await service.get_user_roles("auth0|abc/def")

    assert provider.calls[0]["path"] == "users/auth0%7Cabc%2Fdef/roles"


@pytest.mark.asyncio
async def test_role_assignment_supplies_no_content_answer():
    provider = _RecordingProvider()
    service = IdentityService(provider)

    await service.assign_roles_to_user("u1", ["rol_1", "rol_2"])

    call = provider.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"roles": ["rol_1", "rol_2"]}
    assert call["no_content"] == {"roles": ["rol_1", "rol_2"]}


@pytest.mark.asyncio
async def test_update_role_sends_only_present_fields():
    provider = _RecordingProvider()
    service = IdentityService(provider)

    await service.update_role("rol_1", UpdateRoleRequest(description="Ops"))

    assert provider.calls[0]["json"] == {"description": "Ops"}


@pytest.mark.asyncio
async def test_refresh_token_forces_refresh():
    provider = _RecordingProvider()
    service = IdentityService(provider)

    assert await service.refresh_token() == "fresh-token"
    assert provider.refreshed is True
