"""
Appointment model for database.
"""
import enum
import uuid

from sqlalchemy import Column, Date, DateTime, Enum as SQLEnum, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from dealership.database import Base


class AppointmentStatus(str, enum.Enum):
    """Appointment status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Appointment(Base):
    """Appointment database model."""

    __tablename__ = "appointments"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)
    client_name = Column(String, nullable=False)
    client_email = Column(String, nullable=True)
    client_phone = Column(String, nullable=False)
    service_id = Column(String(32), ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(SQLEnum(AppointmentStatus), default=AppointmentStatus.PENDING, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    service = relationship("Service", back_populates="appointments")
