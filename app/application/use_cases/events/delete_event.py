"""Use case for deleting an event."""

from sqlalchemy.orm import Session

from app.domain.exceptions import PermissionDeniedError
from app.infrastructure.repositories import EventRepository, GroupRepository

from .get_event import get_event


def delete_event(session: Session, event_id: int, *, user_id: int) -> None:
    """Delete the event; only admins of its group may do so."""

    event = get_event(session, event_id)
    membership = GroupRepository(session).get_membership(event.group_id, user_id)
    if membership is None or not membership.is_active():
        raise PermissionDeniedError("User is not a member of this group")
    if not membership.is_admin():
        raise PermissionDeniedError("Only group admins can delete events")

    EventRepository(session).delete(event_id)
