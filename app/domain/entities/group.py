"""Domain entities describing study groups and their members."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class GroupMemberRole(str, Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class GroupMemberStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"


@dataclass
class Group:
    """Study group that owns events."""

    id: int | None
    name: str
    description: str | None = None
    created_by: int | None = None
    created_at: datetime | None = None


@dataclass
class GroupMember:
    """Membership of a user inside a group."""

    id: int | None
    group_id: int
    user_id: int
    role: GroupMemberRole
    status: GroupMemberStatus
    joined_at: datetime | None = None

    def is_active(self) -> bool:
        return self.status == GroupMemberStatus.ACTIVE

    def is_admin(self) -> bool:
        """Return ``True`` for active members holding the admin role."""

        return self.is_active() and self.role == GroupMemberRole.ADMIN


__all__ = ["Group", "GroupMember", "GroupMemberRole", "GroupMemberStatus"]
