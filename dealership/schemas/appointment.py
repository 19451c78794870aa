"""
Pydantic schemas for Appointment.
"""
import datetime as dt
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from dealership.models.appointment import AppointmentStatus

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _blank_email_is_none(v):
    # The booking form submits an empty string when the field is skipped
    if isinstance(v, str) and not v.strip():
        return None
    return v


class AppointmentBase(BaseModel):
    """Base appointment schema with common fields."""
    date: dt.date
    time: str = Field(pattern=TIME_PATTERN)
    client_name: str = Field(min_length=1)
    client_email: Optional[EmailStr] = None
    client_phone: str = Field(min_length=1)
    notes: Optional[str] = None

    @field_validator("client_email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        return _blank_email_is_none(v)


class AppointmentCreate(AppointmentBase):
    """Schema for the public booking form. Status is always set by the server."""
    service_id: str = Field(min_length=1)


class AppointmentUpdate(BaseModel):
    """Schema for admin edits, including status changes."""
    date: Optional[dt.date] = None
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    client_name: Optional[str] = Field(default=None, min_length=1)
    client_email: Optional[EmailStr] = None
    client_phone: Optional[str] = Field(default=None, min_length=1)
    service_id: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[AppointmentStatus] = None

    @field_validator("client_email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        return _blank_email_is_none(v)


class Appointment(AppointmentBase):
    """Schema for appointment responses."""
    id: str
    service_id: Optional[str] = None
    status: AppointmentStatus
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
