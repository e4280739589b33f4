"""Persistence helpers for groups and group memberships."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import (
    Group,
    GroupMember,
    GroupMemberRole,
    GroupMemberStatus,
    User,
)
from app.infrastructure.models import GroupMemberModel, GroupModel, UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class GroupRepository:
    """Read groups and their memberships.

    Group management itself lives outside this service; the write helpers here
    exist so scripts and tests can seed data.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, group_id: int) -> Group | None:
        model = self.session.get(GroupModel, group_id)
        return self._to_entity(model) if model else None

    def create(self, group: Group) -> Group:
        model = GroupModel(
            name=group.name,
            description=group.description,
            created_by=group.created_by,
            created_at=ensure_app_naive_datetime(group.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def add_member(
        self,
        group_id: int,
        user_id: int,
        *,
        role: GroupMemberRole = GroupMemberRole.MEMBER,
        status: GroupMemberStatus = GroupMemberStatus.ACTIVE,
    ) -> GroupMember:
        model = GroupMemberModel(
            group_id=group_id,
            user_id=user_id,
            role=role.value,
            status=status.value,
            joined_at=ensure_app_naive_datetime(now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._member_to_entity(model)

    def remove_member(self, group_id: int, user_id: int) -> None:
        self.session.query(GroupMemberModel).filter(
            GroupMemberModel.group_id == group_id,
            GroupMemberModel.user_id == user_id,
        ).delete(synchronize_session=False)
        self.session.commit()

    def get_membership(self, group_id: int, user_id: int) -> GroupMember | None:
        model = (
            self.session.query(GroupMemberModel)
            .filter(GroupMemberModel.group_id == group_id)
            .filter(GroupMemberModel.user_id == user_id)
            .one_or_none()
        )
        return self._member_to_entity(model) if model else None

    def list_active_members(self, group_id: int) -> Sequence[User]:
        """Return users whose membership in ``group_id`` is ACTIVE right now."""

        query = (
            self.session.query(UserModel)
            .join(GroupMemberModel, GroupMemberModel.user_id == UserModel.id)
            .filter(GroupMemberModel.group_id == group_id)
            .filter(GroupMemberModel.status == GroupMemberStatus.ACTIVE.value)
            .order_by(UserModel.id.asc())
        )
        return [
            User(id=model.id, name=model.name, email=model.email, is_active=bool(model.is_active))
            for model in query.all()
        ]

    @staticmethod
    def _to_entity(model: GroupModel) -> Group:
        return Group(
            id=model.id,
            name=model.name,
            description=model.description,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _member_to_entity(model: GroupMemberModel) -> GroupMember:
        return GroupMember(
            id=model.id,
            group_id=model.group_id,
            user_id=model.user_id,
            role=GroupMemberRole(model.role),
            status=GroupMemberStatus(model.status),
            joined_at=ensure_app_timezone(model.joined_at),
        )


__all__ = ["GroupRepository"]
