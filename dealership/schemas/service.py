"""
Pydantic schemas for Service.
"""
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Optional
from dealership.models.service import ServiceCategory

DURATION_PATTERN = re.compile(r"(?:(\d+)h)?(?:(\d+)m)?")


def validate_duration(value: str) -> str:
    """Accept durations such as ``1h30m``, ``45m`` or ``2h``.

    At least one component must be present and minutes may not exceed 59.
    """
    match = DURATION_PATTERN.fullmatch(value)
    if not value or match is None:
        raise ValueError("Duration must look like 1h30m, 45m or 2h")
    minutes = match.group(2)
    if minutes is not None and int(minutes) > 59:
        raise ValueError("Minutes cannot exceed 59")
    return value


class ServiceBase(BaseModel):
    """Base service schema with common fields."""
    name: str = Field(min_length=1)
    category: ServiceCategory
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    duration: str
    description: Optional[str] = None

    @field_validator("duration")
    @classmethod
    def check_duration(cls, v: str) -> str:
        return validate_duration(v)


class ServiceCreate(ServiceBase):
    """Schema for creating a service."""
    pass


class ServiceUpdate(BaseModel):
    """Schema for updating a service."""
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[ServiceCategory] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    duration: Optional[str] = None
    description: Optional[str] = None

    @field_validator("duration")
    @classmethod
    def check_duration(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else validate_duration(v)


class Service(ServiceBase):
    """Schema for service responses."""
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
