"""Use cases for group study events."""

from .create_event import create_event
from .delete_event import delete_event
from .get_event import get_event
from .list_events import list_group_events, list_user_events

__all__ = [
    "create_event",
    "delete_event",
    "get_event",
    "list_group_events",
    "list_user_events",
]
