"""Domain entity — a customer warranty record with audit trail."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .audit import AuditActor


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Warranty:
    """Warranty assigned to a seller for one customer.

    Rows are never deleted: ``deactivate`` flips ``is_active`` and stamps
    the update audit. A change that carries ``status`` additionally stamps
    the status audit, separate from the general update audit.
    """

    customer_id: str
    customer_name: str
    customer_identification: str
    seller_id: str
    seller_name: str
    status: str
    user_created_name: str
    user_created_id: str
    id: int | None = None
    customer_email: str | None = None
    customer_cellphone: str | None = None
    is_active: bool = True
    products_relation_ids: list[str] | None = None
    notes_relation_ids: list[str] | None = None
    user_created_img: str | None = None
    user_created_date: datetime = field(default_factory=_utcnow)
    user_updated_date: datetime | None = None
    user_updated_name: str | None = None
    user_updated_id: str | None = None
    user_updated_img: str | None = None
    user_updated_status_date: datetime | None = None
    user_updated_status_name: str | None = None
    user_updated_status_id: str | None = None
    user_updated_status_img: str | None = None

    def apply_changes(
        self,
        changes: dict[str, Any],
        actor: AuditActor,
        now: datetime | None = None,
    ) -> None:
        """Apply a partial update; keys absent from ``changes`` keep their value."""
        now = now or _utcnow()
        for name, value in changes.items():
            setattr(self, name, value)
        self._stamp_update(actor, now)
        if "status" in changes:
            self.user_updated_status_date = now
            self.user_updated_status_name = actor.name
            self.user_updated_status_id = actor.id
            self.user_updated_status_img = actor.image

    def deactivate(self, actor: AuditActor, now: datetime | None = None) -> None:
        """Soft-delete. Calling it again re-stamps the audit and stays inactive."""
        self.is_active = False
        self._stamp_update(actor, now or _utcnow())

    def _stamp_update(self, actor: AuditActor, now: datetime) -> None:
        self.user_updated_date = now
        if actor.name is not None:
            self.user_updated_name = actor.name
        if actor.id is not None:
            self.user_updated_id = actor.id
        if actor.image is not None:
            self.user_updated_img = actor.image


@dataclass
class WarrantyFilter:
    """Optional predicates for listing warranties; ``None`` means "no predicate"."""

    customer_name: str | None = None
    customer_identification: str | None = None
    seller_id: str | None = None
    status: str | None = None
    is_active: bool | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None
