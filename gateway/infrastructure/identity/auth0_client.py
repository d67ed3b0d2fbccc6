"""Auth0 Management API client — implements the IdentityProvider interface.

Two adapters live here:

- ``ManagementTokenClient`` performs the client-credentials exchange
  against ``{base_url}/oauth/token``.
- ``Auth0ManagementClient`` sends authenticated requests to
  ``{base_url}/api/v2/...`` with a token taken from an ``AccessTokenCache``.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from gateway.application.interfaces import IdentityProvider
from gateway.domain.entities import TokenGrant
from gateway.domain.exceptions import UpstreamAuthError, UpstreamRequestError
from gateway.infrastructure.identity.token_cache import AccessTokenCache

logger = logging.getLogger(__name__)


class _HttpClientMixin:
    """Uses the injected httpx client, or a throwaway one per call."""

    _http_client: httpx.AsyncClient | None
    _timeout: float | None

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)


class ManagementTokenClient(_HttpClientMixin):
    """Fetches management API tokens with the client-credentials grant."""

    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        audience: str,
        *,
        token_path: str = "/oauth/token",
        grant_type: str = "client_credentials",
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._url = f"{base_url.rstrip('/')}/{token_path.lstrip('/')}"
        self._payload = {
            "client_id": client_id,
            "client_secret": client_secret,
            "audience": audience,
            "grant_type": grant_type,
        }
        self._http_client = http_client
        self._timeout = timeout

    async def fetch(self) -> TokenGrant:
        client = self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                self._url,
                json=self._payload,
                headers={"Content-Type": "application/json"},
            )
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            logger.error(
                "Token request failed: %d - %s", response.status_code, response.text
            )
            raise UpstreamAuthError(response.status_code, response.text)

        data = response.json()
        expires_in = data.get("expires_in")
        return TokenGrant(
            access_token=data["access_token"],
            token_type=data.get("token_type") or "Bearer",
            expires_in=int(expires_in) if expires_in is not None else None,
        )


class Auth0ManagementClient(_HttpClientMixin, IdentityProvider):
    """Infrastructure adapter — proxies calls to the Auth0 Management API v2."""

    def __init__(
        self,
        base_url: str,
        token_cache: AccessTokenCache,
        *,
        api_path: str = "/api/v2/",
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._api_root = f"{base_url.rstrip('/')}/{api_path.strip('/')}/"
        self._token_cache = token_cache
        self._http_client = http_client
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "identity"

    async def access_token(self, *, force_refresh: bool = False) -> str:
        if force_refresh:
            self._token_cache.invalidate()
        return await self._token_cache.get()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        no_content: Mapping[str, Any] | None = None,
    ) -> Any:
        token = await self._token_cache.get()
        url = self._api_root + path.lstrip("/")
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        client = self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s", method, url)
            response = await client.request(
                method,
                url,
                params=dict(params) if params else None,
                json=json,
                headers=headers,
            )
        finally:
            if should_close:
                await client.aclose()

        if response.status_code == 204:
            return dict(no_content or {})

        if not response.is_success:
            logger.warning(
                "[%s] %s %s -> %d", self.provider_name, method, path, response.status_code
            )
            raise UpstreamRequestError(
                self.provider_name, response.status_code, response.text
            )

        if not response.content:
            return dict(no_content or {})
        return response.json()
