"""Pydantic models for notification preferences."""

from pydantic import BaseModel, ConfigDict


class PreferenceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    notify_on_new_event: bool
    notify_on_reminder: bool
    email_enabled: bool


class PreferenceUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    notify_on_new_event: bool = True
    notify_on_reminder: bool = True
    email_enabled: bool = True


__all__ = ["PreferenceRead", "PreferenceUpdate"]
