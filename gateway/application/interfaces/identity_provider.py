"""Abstract identity provider interface — port for user/role management APIs."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class IdentityProvider(ABC):
    """Port — what the application layer needs from a management API (e.g. Auth0)."""

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        no_content: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send an authenticated request and return the parsed JSON body.

        Args:
            method: HTTP verb.
            path: Path relative to the management API root (e.g. ``users/abc/roles``).
            params: Query string parameters.
            json: JSON body.
            no_content: Returned (as a new dict) when the upstream answers 204.

        Raises:
            UpstreamAuthError: If no access token could be obtained.
            UpstreamRequestError: If the upstream returns a non-success status.
        """
        ...

    @abstractmethod
    async def access_token(self, *, force_refresh: bool = False) -> str:
        """Return the bearer token used for upstream calls."""
        ...
