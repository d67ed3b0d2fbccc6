from .calendar import (
    Attendee,
    AvailabilityRequest,
    AvailabilityResponse,
    BookEventRequest,
    UpdateEventRequest,
)
from .common import ApiResponse, ErrorResponse, PaginatedResponse
from .followup_note import (
    FollowupNoteCreate,
    FollowupNoteDeactivate,
    FollowupNoteResponse,
    FollowupNoteStatsResponse,
    FollowupNoteUpdate,
)
from .identity import (
    CreateRoleRequest,
    CreateUserRequest,
    RoleUsersRequest,
    TokenResponse,
    UpdateRoleRequest,
    UpdateUserRequest,
    UserRolesRequest,
)
from .warranty import WarrantyCreate, WarrantyDeactivate, WarrantyResponse, WarrantyUpdate

__all__ = [
    "Attendee",
    "AvailabilityRequest",
    "AvailabilityResponse",
    "BookEventRequest",
    "UpdateEventRequest",
    "ApiResponse",
    "ErrorResponse",
    "PaginatedResponse",
    "FollowupNoteCreate",
    "FollowupNoteDeactivate",
    "FollowupNoteResponse",
    "FollowupNoteStatsResponse",
    "FollowupNoteUpdate",
    "CreateRoleRequest",
    "CreateUserRequest",
    "RoleUsersRequest",
    "TokenResponse",
    "UpdateRoleRequest",
    "UpdateUserRequest",
    "UserRolesRequest",
    "WarrantyCreate",
    "WarrantyDeactivate",
    "WarrantyResponse",
    "WarrantyUpdate",
]
