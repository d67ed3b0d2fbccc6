from .calendar_provider import CalendarProvider
from .followup_note_repository import FollowupNoteRepository
from .identity_provider import IdentityProvider
from .warranty_repository import WarrantyRepository

__all__ = [
    "CalendarProvider",
    "FollowupNoteRepository",
    "IdentityProvider",
    "WarrantyRepository",
]
