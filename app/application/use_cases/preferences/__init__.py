"""Use cases for notification delivery preferences."""

from .get_preferences import get_preferences
from .resolve_preferences import resolve_preferences
from .update_preferences import update_preferences

__all__ = ["get_preferences", "resolve_preferences", "update_preferences"]
