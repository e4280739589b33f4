"""Endpoints for reading and managing the user's notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_all_notifications,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    list_unread_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    mark_notification_unread,
)
from app.domain.entities import Notification, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, to_http_exception
from app.interfaces.api.schemas import (
    NotificationBulkResult,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the notifications of the authenticated user, newest first."""

    notifications = list_notifications_uc(db, current_user.id)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread", response_model=list[NotificationRead])
def list_unread(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    notifications = list_unread_notifications(db, current_user.id)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountRead:
    return UnreadCountRead(count=count_unread_notifications(db, current_user.id))


@router.post("/mark-all-read", response_model=NotificationBulkResult)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationBulkResult:
    return NotificationBulkResult(affected=mark_all_notifications_read(db, current_user.id))


@router.post("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = mark_notification_read(db, notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _notification_to_schema(notification)


@router.post("/{notification_id}/unread", response_model=NotificationRead)
def mark_unread(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = mark_notification_unread(
            db, notification_id, user_id=current_user.id
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _notification_to_schema(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_notification_uc(db, notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", response_model=NotificationBulkResult)
def delete_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationBulkResult:
    return NotificationBulkResult(affected=delete_all_notifications(db, current_user.id))
