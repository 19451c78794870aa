"""
Appointment routes.

Booking is public; listing and editing belong to the admin panel. Status may
move between any two values and there is no double-booking check.
"""
import logging
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional

from dealership.database import get_db
from dealership.errors import NotFound, ValidationFailed
from dealership.models.appointment import Appointment, AppointmentStatus
from dealership.models.service import Service
from dealership.schemas.appointment import (
    Appointment as AppointmentSchema, AppointmentCreate, AppointmentUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["appointments"])

REQUIRED_FIELDS = {"date", "time", "client_name", "client_phone", "status"}


async def _ensure_service_exists(db: AsyncSession, service_id: str) -> None:
    result = await db.execute(select(Service.id).where(Service.id == service_id))
    if result.scalar_one_or_none() is None:
        raise ValidationFailed(
            "Unknown service", details=[{"field": "service_id", "message": "No such service"}]
        )


async def _get_appointment_or_404(db: AsyncSession, appointment_id: str) -> Appointment:
    result = await db.execute(select(Appointment).where(Appointment.id == appointment_id))
    appointment = result.scalar_one_or_none()
    if not appointment:
        raise NotFound("Appointment", appointment_id)
    return appointment


@router.get("/", response_model=List[AppointmentSchema])
async def get_appointments(
    status_filter: Optional[AppointmentStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get all appointments in calendar order with an optional status filter.
    """
    query = select(Appointment)

    if status_filter:
        query = query.where(Appointment.status == status_filter)

    result = await db.execute(query.order_by(Appointment.date, Appointment.time))
    return result.scalars().all()


@router.get("/{appointment_id}", response_model=AppointmentSchema)
async def get_appointment(appointment_id: str, db: AsyncSession = Depends(get_db)):
    """
    Get a specific appointment by ID.
    """
    return await _get_appointment_or_404(db, appointment_id)


@router.post("/", response_model=AppointmentSchema, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment: AppointmentCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book an appointment from the public contact form. Always starts as pending.
    """
    await _ensure_service_exists(db, appointment.service_id)

    db_appointment = Appointment(**appointment.model_dump(), status=AppointmentStatus.PENDING)
    db.add(db_appointment)
    await db.commit()
    await db.refresh(db_appointment)

    logger.info(
        f"Booked appointment on {db_appointment.date} {db_appointment.time}",
        extra={"appointment_id": db_appointment.id, "service_id": db_appointment.service_id},
    )
    return db_appointment


@router.put("/{appointment_id}", response_model=AppointmentSchema)
async def update_appointment(
    appointment_id: str,
    appointment_update: AppointmentUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update an appointment, including its status.
    """
    db_appointment = await _get_appointment_or_404(db, appointment_id)

    update_data = appointment_update.model_dump(exclude_unset=True)
    if update_data.get("service_id"):
        await _ensure_service_exists(db, update_data["service_id"])

    for field, value in update_data.items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(db_appointment, field, value)

    await db.commit()
    await db.refresh(db_appointment)

    return db_appointment


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(appointment_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete an appointment.
    """
    db_appointment = await _get_appointment_or_404(db, appointment_id)

    await db.delete(db_appointment)
    await db.commit()

    return None
