"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, Integer, String

from app.infrastructure.database import Base


class UserModel(Base):
    """Database representation of an account that can join groups."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=True, unique=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
