"""Service endpoints and the duration format."""

import unittest
from decimal import Decimal

from dealership.schemas.service import validate_duration
from tests.helpers import ApiTestCase, service_payload


class TestDurationFormat(unittest.TestCase):

    def test_accepted(self):
        for value in ("1h30m", "45m", "2h", "0h59m", "10h"):
            self.assertEqual(validate_duration(value), value)

    def test_rejected(self):
        for value in ("90m", "", "abc", "1h60m", "30m1h", "1.5h", "h", "m", " 45m"):
            with self.assertRaises(ValueError, msg=value):
                validate_duration(value)


class TestServicesApi(ApiTestCase):

    async def _create(self, **overrides):
        response = await self.client.post("/api/services/", json=service_payload(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    async def test_1_create_and_get(self):
        service = await self._create()
        self.assertEqual(service["category"], "mechanics")
        self.assertEqual(service["duration"], "1h30m")
        self.assertEqual(Decimal(service["price"]), Decimal("150.00"))

        response = await self.client.get(f"/api/services/{service['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Diagnostics")

    async def test_2_invalid_duration_rejected(self):
        for duration in ("90m", "", "abc"):
            response = await self.client.post(
                "/api/services/", json=service_payload(duration=duration)
            )
            self.assertEqual(response.status_code, 400, duration)
            self.assertEqual(response.json()["error"]["code"], "VALIDATION_ERROR")

    async def test_3_unknown_category_rejected(self):
        response = await self.client.post("/api/services/", json=service_payload(category="tuning"))
        self.assertEqual(response.status_code, 400)

    async def test_4_list_with_category_filter(self):
        await self._create(name="Oil change", duration="45m")
        await self._create(name="Ceramic coating", category="detailing", duration="2h")

        response = await self.client.get("/api/services/")
        self.assertEqual(len(response.json()), 2)

        response = await self.client.get("/api/services/", params={"category": "detailing"})
        self.assertEqual([s["name"] for s in response.json()], ["Ceramic coating"])

    async def test_5_update(self):
        service = await self._create()
        response = await self.client.put(
            f"/api/services/{service['id']}", json={"duration": "2h", "price": "180"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["duration"], "2h")
        self.assertEqual(Decimal(response.json()["price"]), Decimal("180"))

        response = await self.client.put(f"/api/services/{service['id']}", json={"duration": "75m"})
        self.assertEqual(response.status_code, 400)

    async def test_6_delete_and_missing(self):
        service = await self._create()
        response = await self.client.delete(f"/api/services/{service['id']}")
        self.assertEqual(response.status_code, 204)

        response = await self.client.get(f"/api/services/{service['id']}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"]["message"], "Service not found")


if __name__ == "__main__":
    unittest.main()
