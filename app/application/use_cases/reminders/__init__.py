"""Use cases deciding when event reminders are sent."""

from .dispatch_due_reminders import dispatch_due_reminders, is_reminder_due
from .dispatch_immediate_reminder import dispatch_immediate_reminder

__all__ = [
    "dispatch_due_reminders",
    "dispatch_immediate_reminder",
    "is_reminder_due",
]
