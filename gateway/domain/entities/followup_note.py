"""Domain entity — follow-up note written about a client."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .audit import AuditActor


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FollowupNote:
    """A note that belongs to exactly one client.

    The creator is the first updater: ``updated_by_*`` starts as a copy of
    ``created_by_*``.
    """

    title: str
    description: str
    client_id: str
    created_by_user_id: str
    created_by_user_name: str
    id: int | None = None
    tag: str | None = None
    file_url: str | None = None
    client_name: str | None = None
    created_by_user_image: str | None = None
    created_by_user_email: str | None = None
    updated_by_user_id: str | None = None
    updated_by_user_name: str | None = None
    updated_by_user_image: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at
        if self.updated_by_user_id is None:
            self.updated_by_user_id = self.created_by_user_id
            self.updated_by_user_name = self.created_by_user_name
            self.updated_by_user_image = self.created_by_user_image

    def apply_changes(
        self,
        changes: dict[str, Any],
        actor: AuditActor,
        now: datetime | None = None,
    ) -> None:
        """Apply a partial update and re-stamp the updater."""
        for name, value in changes.items():
            setattr(self, name, value)
        self.touch(actor, now)

    def touch(self, actor: AuditActor, now: datetime | None = None) -> None:
        """Refresh ``updated_at`` and the updater; ``None`` actor fields keep prior values."""
        self.updated_at = now or _utcnow()
        if actor.id is not None:
            self.updated_by_user_id = actor.id
        if actor.name is not None:
            self.updated_by_user_name = actor.name
        if actor.image is not None:
            self.updated_by_user_image = actor.image


@dataclass
class FollowupNoteFilter:
    """Optional predicates for listing notes and computing their stats."""

    client_id: str | None = None
    clients_ids: list[str] | None = None
    tag: str | None = None
    created_by_user_id: str | None = None
    created_by_user_email: str | None = None
    client_name: str | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None

    def without_date_range(self) -> "FollowupNoteFilter":
        return FollowupNoteFilter(
            client_id=self.client_id,
            clients_ids=self.clients_ids,
            tag=self.tag,
            created_by_user_id=self.created_by_user_id,
            created_by_user_email=self.created_by_user_email,
            client_name=self.client_name,
        )


@dataclass
class FollowupNoteStats:
    """Dense daily (trailing 30 days) and monthly (current year) note counts."""

    daily: dict[str, int] = field(default_factory=dict)
    monthly: dict[str, int] = field(default_factory=dict)
