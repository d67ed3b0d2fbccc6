"""In-process cache for the identity provider's management access token."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from gateway.domain.entities import CachedToken, TokenGrant

logger = logging.getLogger(__name__)

TokenFetcher = Callable[[], Awaitable[TokenGrant]]


class AccessTokenCache:
    """Holds at most one bearer token and refreshes it on demand.

    A token is reused until ``expires_in - safety_margin`` seconds after it
    was received, or ``default_lifetime`` seconds when the token endpoint
    does not report a lifetime. Concurrent callers that find the cache
    empty share one in-flight fetch. ``invalidate()`` also discards any
    fetch already running: its result is handed to the callers that were
    waiting on it but never stored.
    """

    def __init__(
        self,
        fetch: TokenFetcher,
        *,
        safety_margin: float = 300,
        default_lifetime: float = 86400,
        clock: Callable[[], float] = time.time,
    ):
        self._fetch = fetch
        self._safety_margin = safety_margin
        self._default_lifetime = default_lifetime
        self._clock = clock
        self._token: CachedToken | None = None
        self._generation = 0
        self._inflight: asyncio.Task[str] | None = None
        self._inflight_generation = -1

    @property
    def cached(self) -> CachedToken | None:
        return self._token

    async def get(self) -> str:
        """Return a valid token, fetching a new one if needed."""
        token = self._token
        if token is not None and token.is_valid(self._clock()):
            return token.value

        task = self._inflight
        if task is None or self._inflight_generation != self._generation:
            task = asyncio.create_task(self._refresh(self._generation))
            self._inflight = task
            self._inflight_generation = self._generation
        # A cancelled waiter must not cancel the fetch other waiters share.
        return await asyncio.shield(task)

    def invalidate(self) -> None:
        """Forget the cached token; the next get() fetches a new one."""
        self._token = None
        self._generation += 1

    async def _refresh(self, generation: int) -> str:
        try:
            grant = await self._fetch()
            if generation != self._generation:
                logger.info("Discarding access token fetched before invalidation")
                return grant.access_token
            now = self._clock()
            if grant.expires_in is not None:
                expires_at = now + grant.expires_in - self._safety_margin
            else:
                expires_at = now + self._default_lifetime
            self._token = CachedToken(value=grant.access_token, expires_at=expires_at)
            logger.info("Access token refreshed (valid for %.0fs)", expires_at - now)
            return grant.access_token
        finally:
            if self._inflight is asyncio.current_task():
                self._inflight = None
