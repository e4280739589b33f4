"""ORM models used by the application infrastructure."""

from .user import UserModel
from .group import GroupMemberModel, GroupModel
from .event import EventModel
from .notification import NotificationModel
from .preference import NotificationPreferenceModel

__all__ = [
    "UserModel",
    "GroupModel",
    "GroupMemberModel",
    "EventModel",
    "NotificationModel",
    "NotificationPreferenceModel",
]
