"""Shared base classes and sample payloads for the test suite."""

import unittest

from httpx import ASGITransport, AsyncClient

import dealership.models  # noqa: F401 register tables
from dealership.database import Base, engine
from dealership.main import app


def car_payload(**overrides):
    payload = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2019,
        "price": "45000.00",
        "mileage": 82000,
        "fuel_type": "gasoline",
        "transmission": "manual",
        "engine_size": "1.6",
        "color": "silver",
        "description": "One owner, full service history",
        "images": [],
        "is_available": True,
        "featured": False,
    }
    payload.update(overrides)
    return payload


def service_payload(**overrides):
    payload = {
        "name": "Diagnostics",
        "category": "mechanics",
        "price": "150.00",
        "duration": "1h30m",
        "description": "Computer diagnostics and road test",
    }
    payload.update(overrides)
    return payload


class DatabaseTestCase(unittest.IsolatedAsyncioTestCase):
    """Every test starts from empty tables."""

    async def asyncSetUp(self):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)


class ApiTestCase(DatabaseTestCase):
    """Talks to the ASGI app in-process."""

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    async def asyncTearDown(self):
        await self.client.aclose()
        app.dependency_overrides.clear()

    async def create_car(self, **overrides):
        response = await self.client.post("/api/cars/", json=car_payload(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    async def featured_count(self):
        response = await self.client.get("/api/cars/featured-count")
        self.assertEqual(response.status_code, 200)
        return response.json()["count"]
