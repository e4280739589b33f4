"""Expand one event trigger into per-recipient notifications and emails."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.groups import list_active_members
from app.application.use_cases.preferences import resolve_preferences
from app.domain.entities import (
    Event,
    Notification,
    NotificationPreference,
    NotificationType,
    User,
)
from app.domain.exceptions import NotFoundError
from app.infrastructure.delivery import DeliveryDispatcher, get_delivery_dispatcher
from app.infrastructure.repositories import (
    GroupRepository,
    NotificationRepository,
    UserRepository,
)
from app.utils import now_in_app_timezone

from .messages import build_email_content, build_in_app_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipientPlan:
    """What a single member receives for one trigger."""

    user: User
    in_app: bool
    email: bool


def plan_delivery(
    trigger: NotificationType, user: User, preference: NotificationPreference
) -> RecipientPlan:
    """Apply the gating rules of ``trigger`` to one member's preferences.

    Creation announcements always reach the in-app inbox of active members;
    only their email is preference-gated. Reminders are opt-in on both
    channels through ``notify_on_reminder``.
    """

    if trigger == NotificationType.EVENT_CREATED:
        return RecipientPlan(user=user, in_app=True, email=preference.wants_created_email())
    if trigger == NotificationType.EVENT_REMINDER:
        return RecipientPlan(
            user=user,
            in_app=preference.wants_reminder(),
            email=preference.wants_reminder_email(),
        )
    raise ValueError(f"Unsupported notification trigger: {trigger}")


def fan_out(
    session: Session,
    event: Event,
    trigger: NotificationType,
    *,
    dispatcher: DeliveryDispatcher | None = None,
) -> None:
    """Notify the active members of ``event``'s group about ``trigger``.

    The audience and every member's preferences are resolved before anything
    is written, so a resolver failure aborts the whole fan-out. Afterwards each
    recipient is handled on its own: a failed insert or email for one member
    never affects the others.
    """

    trigger = NotificationType(trigger)
    group = GroupRepository(session).get(event.group_id)
    if group is None:
        raise NotFoundError("Group not found")

    members = list_active_members(session, event.group_id)
    if not members:
        logger.debug("Group %s has no active members; nothing to fan out", group.id)
        return

    plans = [
        plan_delivery(trigger, member, resolve_preferences(session, member.id))
        for member in members
    ]

    title, message = build_in_app_content(trigger, event, group)
    creator = UserRepository(session).get(event.created_by)
    subject, body = build_email_content(
        trigger, event, group, creator_name=creator.name if creator else None
    )
    dispatcher = dispatcher or get_delivery_dispatcher()
    repository = NotificationRepository(session)

    created = 0
    emailed = 0
    for plan in plans:
        if plan.in_app:
            try:
                repository.create(
                    Notification(
                        id=None,
                        recipient_id=plan.user.id,
                        title=title,
                        message=message,
                        notification_type=trigger,
                        created_at=now_in_app_timezone(),
                        event_id=event.id,
                        group_id=group.id,
                    )
                )
                created += 1
            except SQLAlchemyError:
                session.rollback()
                logger.exception(
                    "Could not store %s notification for user %s (event %s)",
                    trigger.value,
                    plan.user.id,
                    event.id,
                )

        if plan.email and plan.user.email:
            dispatcher.dispatch(plan.user.email, subject, body)
            emailed += 1

    logger.info(
        "Fan-out %s for event %s: %d notification(s), %d email(s) scheduled",
        trigger.value,
        event.id,
        created,
        emailed,
    )


__all__ = ["RecipientPlan", "fan_out", "plan_delivery"]
