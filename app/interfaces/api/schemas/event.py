"""Pydantic models for study events."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EventCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    group_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    location: str | None = Field(default=None, max_length=255)
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def _check_range(self) -> "EventCreate":
        if self.end_time < self.start_time:
            raise ValueError("Event end time cannot be before start time")
        return self


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    location: str | None
    start_time: datetime
    end_time: datetime
    group_id: int
    created_by: int
    created_at: datetime | None
    reminder_sent_at: datetime | None = None


__all__ = ["EventCreate", "EventRead"]
