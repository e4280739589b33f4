"""Domain entity representing a user."""

from dataclasses import dataclass


@dataclass
class User:
    """Core attributes of an account that can receive notifications."""

    id: int | None
    name: str
    email: str | None
    is_active: bool = True
