"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .group_repository import GroupRepository
from .notification_repository import NotificationRepository
from .preference_repository import NotificationPreferenceRepository
from .user_repository import UserRepository

__all__ = [
    "EventRepository",
    "GroupRepository",
    "NotificationRepository",
    "NotificationPreferenceRepository",
    "UserRepository",
]
