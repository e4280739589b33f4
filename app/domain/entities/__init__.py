"""Domain entities exposed by the application."""

from .event import Event
from .group import Group, GroupMember, GroupMemberRole, GroupMemberStatus
from .notification import Notification, NotificationType
from .preference import NotificationPreference
from .user import User

__all__ = [
    "Event",
    "Group",
    "GroupMember",
    "GroupMemberRole",
    "GroupMemberStatus",
    "Notification",
    "NotificationPreference",
    "NotificationType",
    "User",
]
