"""
Service routes.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional

from dealership.database import get_db
from dealership.errors import NotFound
from dealership.models.service import Service, ServiceCategory
from dealership.schemas.service import Service as ServiceSchema, ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/services", tags=["services"])


async def _get_service_or_404(db: AsyncSession, service_id: str) -> Service:
    result = await db.execute(select(Service).where(Service.id == service_id))
    service = result.scalar_one_or_none()
    if not service:
        raise NotFound("Service", service_id)
    return service


@router.get("/", response_model=List[ServiceSchema])
async def get_services(
    category: Optional[ServiceCategory] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Get all services with an optional category filter.
    """
    query = select(Service)

    if category:
        query = query.where(Service.category == category)

    result = await db.execute(query.order_by(Service.category, Service.name))
    return result.scalars().all()


@router.get("/{service_id}", response_model=ServiceSchema)
async def get_service(service_id: str, db: AsyncSession = Depends(get_db)):
    """
    Get a specific service by ID.
    """
    return await _get_service_or_404(db, service_id)


@router.post("/", response_model=ServiceSchema, status_code=status.HTTP_201_CREATED)
async def create_service(service: ServiceCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a new service.
    """
    db_service = Service(**service.model_dump())
    db.add(db_service)
    await db.commit()
    await db.refresh(db_service)

    logger.info(f"Created service {db_service.name}", extra={"service_id": db_service.id})
    return db_service


@router.put("/{service_id}", response_model=ServiceSchema)
async def update_service(
    service_id: str,
    service_update: ServiceUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update a service.
    """
    db_service = await _get_service_or_404(db, service_id)

    # Update only provided fields
    update_data = service_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None and field != "description":
            continue
        setattr(db_service, field, value)

    await db.commit()
    await db.refresh(db_service)

    return db_service


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a service. Appointments that booked it keep their data but lose the link.
    """
    db_service = await _get_service_or_404(db, service_id)

    await db.delete(db_service)
    await db.commit()

    logger.info("Deleted service", extra={"service_id": service_id})
    return None
