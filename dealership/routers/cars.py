"""
Car routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from decimal import Decimal
from typing import List, Literal, Optional

from dealership import crud
from dealership.database import get_db
from dealership.featured import count_featured_fail_open
from dealership.models.car import FuelType, Transmission
from dealership.schemas.car import Car as CarSchema, CarCreate, CarUpdate, FeaturedCount

router = APIRouter(prefix="/cars", tags=["cars"])

SortOrder = Literal["newest", "oldest", "price-low", "price-high", "mileage-low", "mileage-high"]


@router.get("/", response_model=List[CarSchema])
async def get_cars(
    available: Optional[bool] = None,
    featured: Optional[bool] = None,
    brand: Optional[str] = None,
    fuel_type: Optional[FuelType] = None,
    transmission: Optional[Transmission] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
    sort: Optional[SortOrder] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Get all cars, newest first, with optional filters and sort order.
    """
    return await crud.list_cars(
        db,
        available=available,
        featured=featured,
        brand=brand,
        fuel_type=fuel_type,
        transmission=transmission,
        min_price=min_price,
        max_price=max_price,
        min_year=min_year,
        max_year=max_year,
        sort=sort,
    )


@router.get("/featured", response_model=List[CarSchema])
async def get_featured_cars(db: AsyncSession = Depends(get_db)):
    """
    Get the available featured cars shown on the landing page.
    """
    return await crud.list_cars(db, available=True, featured=True)


@router.get("/featured-count", response_model=FeaturedCount)
async def get_featured_count(db: AsyncSession = Depends(get_db)):
    """
    Get the number of featured cars. Reports 0 if the database is unavailable.
    """
    return FeaturedCount(count=await count_featured_fail_open(db))


@router.get("/{car_id}", response_model=CarSchema)
async def get_car(car_id: str, db: AsyncSession = Depends(get_db)):
    """
    Get a specific car by ID.
    """
    return await crud.get_car(db, car_id)


@router.post("/", response_model=CarSchema, status_code=status.HTTP_201_CREATED)
async def create_car(car: CarCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a new car. Rejected if it asks to be featured and three cars already are.
    """
    return await crud.create_car(db, car)


@router.put("/{car_id}", response_model=CarSchema)
async def update_car(
    car_id: str,
    car_update: CarUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update a car.
    """
    return await crud.update_car(db, car_id, car_update)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a car.
    """
    await crud.delete_car(db, car_id)
    return None
