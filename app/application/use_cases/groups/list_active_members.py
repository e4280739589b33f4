"""Use case resolving the notification audience of a group."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import GroupRepository


def list_active_members(session: Session, group_id: int) -> list[User]:
    """Return the users whose membership in the group is ACTIVE at call time.

    Pending members are excluded. Nothing is cached, so a member who left
    between two triggers of the same group is no longer part of the audience.
    """

    repository = GroupRepository(session)
    if repository.get(group_id) is None:
        raise NotFoundError("Group not found")
    return list(repository.list_active_members(group_id))
