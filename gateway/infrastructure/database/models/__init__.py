from .followup_note import FollowupNoteModel
from .warranty import WarrantyModel

__all__ = [
    "FollowupNoteModel",
    "WarrantyModel",
]
