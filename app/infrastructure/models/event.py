"""SQLAlchemy model for scheduled study events."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class EventModel(Base):
    """Database representation of a group study event."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime(), nullable=False, index=True)
    end_time = Column(DateTime(), nullable=False)
    location = Column(String(255), nullable=True)
    group_id = Column(
        Integer,
        ForeignKey("study_group.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_by = Column(Integer, ForeignKey("user.id"), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    # Set once when the reminder fan-out is claimed by the scheduler or at creation.
    reminder_sent_at = Column(DateTime(), nullable=True)


__all__ = ["EventModel"]
