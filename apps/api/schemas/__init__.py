from .reminders import (
    ReminderCreateRequest,
    ReminderGroupsResponse,
    ReminderResponse,
    ReminderSearchResponse,
    ReminderUpdateRequest,
)

__all__ = [
    "ReminderCreateRequest",
    "ReminderGroupsResponse",
    "ReminderResponse",
    "ReminderSearchResponse",
    "ReminderUpdateRequest",
]
