"""Routes for scheduling and browsing group study events."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.events import (
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_group_events as list_group_events_uc,
    list_user_events as list_user_events_uc,
)
from app.domain.entities import Event, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, to_http_exception
from app.interfaces.api.schemas import EventCreate, EventRead

router = APIRouter(prefix="/events", tags=["events"])


def _to_read_model(event: Event) -> EventRead:
    return EventRead.model_validate(event)


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> EventRead:
    """Schedule an event and notify the members of its group."""

    try:
        event = create_event_uc(
            db,
            creator_id=current_user.id,
            group_id=event_in.group_id,
            title=event_in.title,
            description=event_in.description,
            location=event_in.location,
            start_time=event_in.start_time,
            end_time=event_in.end_time,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(event)


@router.get("/my-events", response_model=list[EventRead])
def list_my_events(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[EventRead]:
    return [_to_read_model(event) for event in list_user_events_uc(db, current_user.id)]


@router.get("/group/{group_id}", response_model=list[EventRead])
def list_group_events(
    group_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[EventRead]:
    try:
        events = list_group_events_uc(db, group_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(event) for event in events]


@router.get("/{event_id}", response_model=EventRead)
def read_event(
    event_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> EventRead:
    try:
        event = get_event_uc(db, event_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_event_uc(db, event_id, user_id=current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
