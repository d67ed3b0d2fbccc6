"""Audit actor — who performed a mutation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditActor:
    """Identity of the caller stamped into audit fields.

    Any attribute may be ``None`` on soft-delete, where the caller is
    allowed to omit its identity and previous values are retained.
    """

    id: str | None = None
    name: str | None = None
    image: str | None = None
