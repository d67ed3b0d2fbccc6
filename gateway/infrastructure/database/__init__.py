from .base import Base
from .session import DatabaseRegistry, get_database_registry, session_scope
from .models import FollowupNoteModel, WarrantyModel

__all__ = [
    "Base",
    "DatabaseRegistry",
    "get_database_registry",
    "session_scope",
    "FollowupNoteModel",
    "WarrantyModel",
]
