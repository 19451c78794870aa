"""
CRUD operations for ``Car`` listings.

Writes that touch the ``featured`` flag go through the featured listing
limiter and hand out a ``featured_slot``. When a concurrent writer grabs the
same slot first, the database rejects the commit with an IntegrityError; the
write is rolled back and retried against fresh state, and ends in
FeaturedLimitExceeded once no slot is left.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dealership.errors import FeaturedLimitExceeded, NotFound
from dealership.featured import allocate_slot, ensure_can_feature
from dealership.models.car import Car, FEATURED_CAR_LIMIT, FuelType, Transmission
from dealership.schemas.car import CarCreate, CarUpdate

logger = logging.getLogger(__name__)

# One retry per slot is enough: each lost race means another slot is gone.
SLOT_ATTEMPTS = FEATURED_CAR_LIMIT + 1

NULLABLE_FIELDS = {"engine_size", "color", "description"}

SORT_ORDERS = {
    "newest": (Car.year.desc(), Car.created_at.desc()),
    "oldest": (Car.year.asc(), Car.created_at.asc()),
    "price-low": (Car.price.asc(),),
    "price-high": (Car.price.desc(),),
    "mileage-low": (Car.mileage.asc(),),
    "mileage-high": (Car.mileage.desc(),),
}


async def get_car(db: AsyncSession, car_id: str) -> Car:
    result = await db.execute(select(Car).where(Car.id == car_id))
    car = result.scalar_one_or_none()
    if car is None:
        raise NotFound("Car", car_id)
    return car


async def list_cars(
    db: AsyncSession,
    available: Optional[bool] = None,
    featured: Optional[bool] = None,
    brand: Optional[str] = None,
    fuel_type: Optional[FuelType] = None,
    transmission: Optional[Transmission] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
    sort: Optional[str] = None,
) -> List[Car]:
    """List cars, most recently added first unless ``sort`` says otherwise."""
    query = select(Car)
    if available is not None:
        query = query.where(Car.is_available.is_(available))
    if featured is not None:
        query = query.where(Car.featured.is_(featured))
    if brand:
        query = query.where(Car.brand.ilike(f"%{brand}%"))
    if fuel_type is not None:
        query = query.where(Car.fuel_type == fuel_type)
    if transmission is not None:
        query = query.where(Car.transmission == transmission)
    if min_price is not None:
        query = query.where(Car.price >= min_price)
    if max_price is not None:
        query = query.where(Car.price <= max_price)
    if min_year is not None:
        query = query.where(Car.year >= min_year)
    if max_year is not None:
        query = query.where(Car.year <= max_year)

    if sort is not None:
        query = query.order_by(*SORT_ORDERS[sort])
    else:
        query = query.order_by(Car.created_at.desc())

    result = await db.execute(query)
    return list(result.scalars().all())


async def create_car(db: AsyncSession, car_in: CarCreate) -> Car:
    data = car_in.model_dump()
    featured = data["featured"]

    for attempt in range(1, SLOT_ATTEMPTS + 1):
        await ensure_can_feature(db, None, featured)
        car = Car(**data)
        if featured:
            car.featured_slot = await allocate_slot(db)
        db.add(car)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            if not featured:
                raise
            logger.warning("Featured slot taken by a concurrent write, retrying", extra={"attempt": attempt})
            continue

        await db.refresh(car)
        logger.info(f"Created car {car.brand} {car.model}", extra={"car_id": car.id})
        return car

    raise FeaturedLimitExceeded()


async def update_car(db: AsyncSession, car_id: str, car_update: CarUpdate) -> Car:
    """Apply a partial update. Only fields present in the payload change."""
    update_data = _writable_fields(car_update.model_dump(exclude_unset=True))
    featured = update_data.get("featured")

    for attempt in range(1, SLOT_ATTEMPTS + 1):
        car = await get_car(db, car_id)
        await ensure_can_feature(db, car_id, featured)

        if featured is True and car.featured_slot is None:
            car.featured_slot = await allocate_slot(db)
        elif featured is False:
            car.featured_slot = None

        for field, value in update_data.items():
            setattr(car, field, value)

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            if not featured:
                raise
            logger.warning(
                "Featured slot taken by a concurrent write, retrying",
                extra={"car_id": car_id, "attempt": attempt},
            )
            continue

        await db.refresh(car)
        logger.info("Updated car", extra={"car_id": car_id})
        return car

    raise FeaturedLimitExceeded()


async def delete_car(db: AsyncSession, car_id: str) -> None:
    car = await get_car(db, car_id)
    await db.delete(car)
    await db.commit()
    logger.info("Deleted car", extra={"car_id": car_id})


def _writable_fields(update_data: Dict[str, Any]) -> Dict[str, Any]:
    # An explicit null on a required column means "leave it alone".
    return {
        field: value
        for field, value in update_data.items()
        if value is not None or field in NULLABLE_FIELDS
    }
