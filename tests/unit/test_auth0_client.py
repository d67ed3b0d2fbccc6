"""Unit tests for the Auth0 management and token clients."""

import json

import httpx
import pytest

from gateway.domain.exceptions import UpstreamAuthError, UpstreamRequestError
from gateway.infrastructure.identity import (
    AccessTokenCache,
    Auth0ManagementClient,
    ManagementTokenClient,
)

BASE_URL = "https://tenant.example.auth0.com"


# ── Helpers ──


def _make_transport(api_handler, token_status: int = 200, token_body: dict | None = None):
    """Token endpoint answers on /oauth/token, everything else goes to ``api_handler``."""
    seen: dict = {"token_requests": [], "api_requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth/token":
            seen["token_requests"].append(json.loads(request.content))
            body = token_body if token_body is not None else {
                "access_token": "mgmt-token",
                "token_type": "Bearer",
                "expires_in": 86400,
            }
            return httpx.Response(token_status, json=body)
        seen["api_requests"].append(request)
        return api_handler(request)

    return httpx.MockTransport(handler), seen


def _build_client(transport: httpx.MockTransport) -> Auth0ManagementClient:
    http_client = httpx.AsyncClient(transport=transport)
    token_client = ManagementTokenClient(
        BASE_URL, "client-id", "client-secret", f"{BASE_URL}/api/v2/", http_client=http_client
    )
    return Auth0ManagementClient(
        BASE_URL, AccessTokenCache(token_client.fetch), http_client=http_client
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_request_sends_bearer_token_and_parses_json():
    transport, seen = _make_transport(lambda r: httpx.Response(200, json=[{"user_id": "auth0|1"}]))
    client = _build_client(transport)

    result = await client.request("GET", "users", params={"page": 0, "per_page": 50})

    assert result == [{"user_id": "auth0|1"}]
    request = seen["api_requests"][0]
    assert request.url.path == "/api/v2/users"
    assert request.url.params["per_page"] == "50"
    assert request.headers["Authorization"] == "Bearer mgmt-token"
    assert seen["token_requests"] == [{
        "client_id": "client-id",
        "client_secret": "client-secret",
        "audience": f"{BASE_URL}/api/v2/",
        "grant_type": "client_credentials",
    }]


@pytest.mark.asyncio
async def test_token_is_fetched_once_for_many_requests():
    transport, seen = _make_transport(lambda r: httpx.Response(200, json={}))
    client = _build_client(transport)

    for _ in range(3):
        await client.request("GET", "roles")

    assert len(seen["token_requests"]) == 1
    assert len(seen["api_requests"]) == 3


@pytest.mark.asyncio
async def test_no_content_answer_returns_what_was_sent():
    transport, _ = _make_transport(lambda r: httpx.Response(204))
    client = _build_client(transport)

    result = await client.request(
        "POST",
        "users/auth0%7C1/roles",
        json={"roles": ["rol_1"]},
        no_content={"roles": ["rol_1"]},
    )

    assert result == {"roles": ["rol_1"]}


@pytest.mark.asyncio
async def test_error_status_raises_upstream_request_error():
    transport, _ = _make_transport(
        lambda r: httpx.Response(404, json={"message": "The user does not exist."})
    )
    client = _build_client(transport)

    with pytest.raises(UpstreamRequestError) as exc_info:
        await client.request("GET", "users/missing/roles")

    assert exc_info.value.status_code == 404
    assert exc_info.value.provider == "identity"
    assert "does not exist" in exc_info.value.body


@pytest.mark.asyncio
async def test_token_endpoint_failure_raises_upstream_auth_error():
    transport, seen = _make_transport(
        lambda r: httpx.Response(200, json={}),
        token_status=401,
        token_body={"error": "access_denied"},
    )
    client = _build_client(transport)

    with pytest.raises(UpstreamAuthError) as exc_info:
        await client.request("GET", "users")

    assert exc_info.value.status_code == 401
    assert "access_denied" in exc_info.value.body
    assert seen["api_requests"] == []


@pytest.mark.asyncio
async def test_force_refresh_fetches_new_token():
    transport, seen = _make_transport(lambda r: httpx.Response(200, json={}))
    client = _build_client(transport)

    await client.access_token()
    await client.access_token(force_refresh=True)

    assert len(seen["token_requests"]) == 2
