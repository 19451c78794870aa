"""
Pydantic schemas for Car.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from dealership.models.car import FuelType, Transmission


class CarBase(BaseModel):
    """Base car schema with common fields."""
    brand: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int = Field(ge=1900, le=2100)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    mileage: int = Field(ge=0)
    fuel_type: FuelType
    transmission: Transmission
    engine_size: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    is_available: bool = True
    featured: bool = False


class CarCreate(CarBase):
    """Schema for creating a car."""
    pass


class CarUpdate(BaseModel):
    """Schema for updating a car. Only provided fields are written."""
    brand: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    year: Optional[int] = Field(default=None, ge=1900, le=2100)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    mileage: Optional[int] = Field(default=None, ge=0)
    fuel_type: Optional[FuelType] = None
    transmission: Optional[Transmission] = None
    engine_size: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    is_available: Optional[bool] = None
    featured: Optional[bool] = None


class Car(CarBase):
    """Schema for car responses."""
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FeaturedCount(BaseModel):
    """Number of cars currently on the landing page."""
    count: int
