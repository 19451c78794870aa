"""
Car model for database.
"""
import enum
import uuid

from sqlalchemy import (
    Boolean, CheckConstraint, Column, DateTime, Enum as SQLEnum, Integer, JSON,
    Numeric, String, Text,
)
from sqlalchemy.sql import func

from dealership.database import Base

# Landing page capacity. Enforced by the featured_slot constraints below.
FEATURED_CAR_LIMIT = 3


class FuelType(str, enum.Enum):
    """Fuel type enumeration."""
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    HYBRID = "hybrid"
    ELECTRIC = "electric"
    GAS = "gas"


class Transmission(str, enum.Enum):
    """Gearbox enumeration."""
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    SEMI_AUTOMATIC = "semi-automatic"


def _new_id() -> str:
    return uuid.uuid4().hex


class Car(Base):
    """Car listing database model.

    A featured car holds one of the slots 1..FEATURED_CAR_LIMIT. The slot is
    unique, so the database refuses a fourth featured car even when two
    requests race past the application-level count.
    """

    __tablename__ = "cars"
    __table_args__ = (
        CheckConstraint(
            f"featured_slot IS NULL OR (featured_slot >= 1 AND featured_slot <= {FEATURED_CAR_LIMIT})",
            name="ck_cars_featured_slot_range",
        ),
        CheckConstraint(
            "(featured AND featured_slot IS NOT NULL) OR (NOT featured AND featured_slot IS NULL)",
            name="ck_cars_featured_has_slot",
        ),
    )

    id = Column(String(32), primary_key=True, default=_new_id)
    brand = Column(String, nullable=False, index=True)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    mileage = Column(Integer, nullable=False)
    fuel_type = Column(SQLEnum(FuelType), nullable=False)
    transmission = Column(SQLEnum(Transmission), nullable=False)
    engine_size = Column(String, nullable=True)
    color = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False, index=True)
    featured_slot = Column(Integer, unique=True, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
