"""Use cases that read group membership."""

from .list_active_members import list_active_members

__all__ = ["list_active_members"]
