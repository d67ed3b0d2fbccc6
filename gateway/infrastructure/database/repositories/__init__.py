from .followup_note_repository import SQLAlchemyFollowupNoteRepository
from .warranty_repository import SQLAlchemyWarrantyRepository

__all__ = [
    "SQLAlchemyFollowupNoteRepository",
    "SQLAlchemyWarrantyRepository",
]
