"""
Pydantic schemas for request/response validation.
"""
from dealership.schemas.car import CarBase, CarCreate, CarUpdate, Car, FeaturedCount
from dealership.schemas.service import (
    ServiceBase, ServiceCreate, ServiceUpdate, Service, validate_duration,
)
from dealership.schemas.appointment import (
    AppointmentBase, AppointmentCreate, AppointmentUpdate, Appointment,
)
from dealership.schemas.upload import UploadResult

__all__ = [
    "CarBase", "CarCreate", "CarUpdate", "Car", "FeaturedCount",
    "ServiceBase", "ServiceCreate", "ServiceUpdate", "Service", "validate_duration",
    "AppointmentBase", "AppointmentCreate", "AppointmentUpdate", "Appointment",
    "UploadResult",
]
