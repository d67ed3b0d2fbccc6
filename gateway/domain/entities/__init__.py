from .access_token import CachedToken, TokenGrant
from .audit import AuditActor
from .followup_note import FollowupNote, FollowupNoteFilter, FollowupNoteStats
from .pagination import Page, PageRequest
from .warranty import Warranty, WarrantyFilter

__all__ = [
    "CachedToken",
    "TokenGrant",
    "AuditActor",
    "FollowupNote",
    "FollowupNoteFilter",
    "FollowupNoteStats",
    "Page",
    "PageRequest",
    "Warranty",
    "WarrantyFilter",
]
