"""Public helpers for emitting and managing notifications."""

from .delete_notifications import delete_all_notifications, delete_notification
from .fan_out import RecipientPlan, fan_out, plan_delivery
from .get_notification import get_owned_notification
from .list_notifications import (
    count_unread_notifications,
    list_notifications,
    list_unread_notifications,
)
from .mark_notifications import (
    mark_all_notifications_read,
    mark_notification_read,
    mark_notification_unread,
)

__all__ = [
    "RecipientPlan",
    "count_unread_notifications",
    "delete_all_notifications",
    "delete_notification",
    "fan_out",
    "get_owned_notification",
    "list_notifications",
    "list_unread_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "mark_notification_unread",
    "plan_delivery",
]
