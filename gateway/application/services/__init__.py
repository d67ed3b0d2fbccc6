from .calendar_service import CalendarService
from .followup_note_service import FollowupNoteService
from .identity_service import IdentityService
from .warranty_service import WarrantyService

__all__ = [
    "CalendarService",
    "FollowupNoteService",
    "IdentityService",
    "WarrantyService",
]
