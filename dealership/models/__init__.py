"""
SQLAlchemy database models.
"""
from dealership.models.car import Car, FuelType, Transmission, FEATURED_CAR_LIMIT
from dealership.models.service import Service, ServiceCategory
from dealership.models.appointment import Appointment, AppointmentStatus

__all__ = [
    "Car", "FuelType", "Transmission", "FEATURED_CAR_LIMIT",
    "Service", "ServiceCategory",
    "Appointment", "AppointmentStatus",
]
