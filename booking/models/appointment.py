"""Appointment model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from booking.database import Base


class Appointment(Base):
    """Represents a booked appointment between a student and a professor."""
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # Copied from the booked slot, not a foreign key to it.
    time_slot = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
