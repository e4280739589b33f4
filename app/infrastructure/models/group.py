"""SQLAlchemy models for study groups and memberships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class GroupModel(Base):
    """Database representation of a study group."""

    __tablename__ = "study_group"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    members = relationship(
        "GroupMemberModel",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class GroupMemberModel(Base):
    """Membership row linking a user to a group with a role and status."""

    __tablename__ = "group_member"
    __table_args__ = (UniqueConstraint("group_id", "user_id", name="uq_group_member"),)

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(
        Integer,
        ForeignKey("study_group.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role = Column(String(20), nullable=False, default="MEMBER")
    status = Column(String(20), nullable=False, default="PENDING", index=True)
    joined_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    group = relationship("GroupModel", back_populates="members")
    user = relationship("UserModel", lazy="joined")


__all__ = ["GroupModel", "GroupMemberModel"]
