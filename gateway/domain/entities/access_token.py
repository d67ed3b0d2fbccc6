"""Domain entities for upstream access tokens."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenGrant:
    """Raw answer of a client-credentials token endpoint."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None


@dataclass(frozen=True)
class CachedToken:
    """A bearer token and the absolute instant (epoch seconds) it stops being reused."""

    value: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at
