"""Errors raised by the reminder and notification use cases."""


class NotFoundError(ValueError):
    """Raised when an event, group, user or notification does not exist."""


class PermissionDeniedError(ValueError):
    """Raised when a user acts on a resource they do not own or administer."""


class DeliveryError(RuntimeError):
    """Raised by a delivery sink when a message could not be handed off."""


__all__ = ["DeliveryError", "NotFoundError", "PermissionDeniedError"]
