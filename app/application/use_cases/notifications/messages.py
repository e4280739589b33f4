"""Texts used for in-app notifications and emails about events."""

from __future__ import annotations

from html import escape

from app.domain.entities import Event, Group, NotificationType


def build_in_app_content(
    trigger: NotificationType, event: Event, group: Group
) -> tuple[str, str]:
    """Return the ``(title, message)`` pair of the in-app notification."""

    if trigger == NotificationType.EVENT_CREATED:
        return (
            f"New Study Session: {event.title}",
            f"A new study session '{event.title}' has been scheduled in {group.name} group.",
        )
    if trigger == NotificationType.EVENT_REMINDER:
        return (
            f"Event Reminder: {event.title}",
            f"Your study session '{event.title}' starts soon.",
        )
    raise ValueError(f"Unsupported notification trigger: {trigger}")


def build_email_content(
    trigger: NotificationType,
    event: Event,
    group: Group,
    *,
    creator_name: str | None = None,
) -> tuple[str, str]:
    """Return the ``(subject, html_body)`` pair of the email for ``trigger``."""

    details = [
        f"<p><strong>Title:</strong> {escape(event.title)}</p>",
        f"<p><strong>Description:</strong> {escape(event.description or '-')}</p>",
        f"<p><strong>Date:</strong> {event.start_time:%A, %d %B %Y}</p>",
        f"<p><strong>Time:</strong> {event.start_time:%H:%M} to {event.end_time:%H:%M}</p>",
        f"<p><strong>Location:</strong> {escape(event.location or '-')}</p>",
        f"<p><strong>Group:</strong> {escape(group.name)}</p>",
    ]

    if trigger == NotificationType.EVENT_CREATED:
        subject = f"New Study Session: {event.title}"
        parts = ["<p>Hello,</p>", "<p>A new study session has been scheduled.</p>"]
        parts.extend(details)
        parts.append(f"<p><strong>Created by:</strong> {escape(creator_name or '-')}</p>")
        parts.append(
            "<p>You are receiving this email because you are a member of this study group.</p>"
        )
    elif trigger == NotificationType.EVENT_REMINDER:
        subject = f"Reminder: {event.title} starts soon"
        parts = ["<p>Hello,</p>", "<p>Your study session is starting soon!</p>"]
        parts.extend(details)
        parts.append("<p>Don't forget to join on time.</p>")
    else:
        raise ValueError(f"Unsupported notification trigger: {trigger}")

    parts.append("<p>Happy studying!</p>")
    return subject, "".join(parts)


__all__ = ["build_email_content", "build_in_app_content"]
