"""SQLAlchemy model for per-user notification preferences."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer

from app.infrastructure.database import Base


class NotificationPreferenceModel(Base):
    """At most one row per user; a missing row means every flag is enabled."""

    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    notify_on_new_event = Column(Boolean, nullable=False, default=True)
    notify_on_reminder = Column(Boolean, nullable=False, default=True)
    email_enabled = Column(Boolean, nullable=False, default=True)


__all__ = ["NotificationPreferenceModel"]
