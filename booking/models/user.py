"""User model definitions."""

from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String, func
from booking.database import Base


class Role(str, Enum):
    STUDENT = "student"
    PROFESSOR = "professor"


class User(Base):
    """Represents an application user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False)  # student/professor
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
