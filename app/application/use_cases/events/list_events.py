"""Use cases listing events."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import EventRepository, GroupRepository


def list_group_events(session: Session, group_id: int) -> Sequence[Event]:
    """Return the events of a group ordered by start time."""

    if GroupRepository(session).get(group_id) is None:
        raise NotFoundError("Group not found")
    return EventRepository(session).list_for_group(group_id)


def list_user_events(session: Session, user_id: int) -> Sequence[Event]:
    """Return the events of every group the user actively belongs to."""

    return EventRepository(session).list_for_user(user_id)
