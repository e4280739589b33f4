from .event import EventCreate, EventRead
from .notification import NotificationBulkResult, NotificationRead, UnreadCountRead
from .preference import PreferenceRead, PreferenceUpdate

__all__ = [
    "EventCreate",
    "EventRead",
    "NotificationBulkResult",
    "NotificationRead",
    "PreferenceRead",
    "PreferenceUpdate",
    "UnreadCountRead",
]
