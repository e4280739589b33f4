"""Use case for retrieving a single event."""

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import EventRepository


def get_event(session: Session, event_id: int) -> Event:
    """Return the requested event or raise an error if it does not exist."""

    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event
