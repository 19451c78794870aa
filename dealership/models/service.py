"""
Service offer model for database.
"""
import enum
import uuid

from sqlalchemy import Column, DateTime, Enum as SQLEnum, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from dealership.database import Base


class ServiceCategory(str, enum.Enum):
    """Service category enumeration."""
    MECHANICS = "mechanics"
    DETAILING = "detailing"


class Service(Base):
    """Workshop service database model."""

    __tablename__ = "services"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    name = Column(String, nullable=False)
    category = Column(SQLEnum(ServiceCategory), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(String(16), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    appointments = relationship("Appointment", back_populates="service", passive_deletes=True)
