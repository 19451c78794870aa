"""
Featured listing limiter.

At most ``FEATURED_CAR_LIMIT`` cars may be shown on the landing page. The
check here is the fast, user-friendly path; the ``featured_slot`` unique
constraint on ``cars`` is what actually holds the line when two writers race
(see ``dealership.crud``).
"""
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dealership.errors import FeaturedLimitExceeded
from dealership.models.car import Car, FEATURED_CAR_LIMIT

logger = logging.getLogger(__name__)


async def count_featured(db: AsyncSession) -> int:
    """Return the number of cars currently marked as featured."""
    result = await db.execute(
        select(func.count()).select_from(Car).where(Car.featured.is_(True))
    )
    return result.scalar_one()


async def count_featured_fail_open(db: AsyncSession) -> int:
    """Like ``count_featured`` but reports zero when the database fails.

    Used by the public featured-count endpoint so the landing page keeps
    rendering while the database is unavailable.
    """
    try:
        return await count_featured(db)
    except (SQLAlchemyError, OSError) as e:
        # asyncpg connection failures surface as OSError, unwrapped
        logger.warning(f"Featured count unavailable, reporting 0: {e}")
        return 0


async def ensure_can_feature(
    db: AsyncSession, car_id: Optional[str], featured: Optional[bool]
) -> None:
    """Raise FeaturedLimitExceeded if featuring this car would break the cap.

    ``car_id`` is None for a car that does not exist yet. Re-saving a car that
    is already featured never counts twice.
    """
    if featured is not True:
        return

    if car_id is not None:
        result = await db.execute(select(Car.featured).where(Car.id == car_id))
        if result.scalar_one_or_none():
            return

    current = await count_featured(db)
    if current >= FEATURED_CAR_LIMIT:
        logger.info(
            f"Rejected featuring car: {current} of {FEATURED_CAR_LIMIT} slots in use",
            extra={"car_id": car_id, "error_code": FeaturedLimitExceeded.code},
        )
        raise FeaturedLimitExceeded()


async def allocate_slot(db: AsyncSession) -> int:
    """Return the lowest free featured slot."""
    result = await db.execute(
        select(Car.featured_slot).where(Car.featured_slot.is_not(None))
    )
    taken = set(result.scalars())
    for slot in range(1, FEATURED_CAR_LIMIT + 1):
        if slot not in taken:
            return slot
    raise FeaturedLimitExceeded()
