"""Appointment intake and admin edits."""

import unittest

from tests.helpers import ApiTestCase, service_payload


class TestAppointmentsApi(ApiTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        response = await self.client.post("/api/services/", json=service_payload())
        self.service = response.json()

    def _booking(self, **overrides):
        payload = {
            "date": "2026-11-03",
            "time": "10:00",
            "client_name": "Jan Kowalski",
            "client_email": "jan@example.com",
            "client_phone": "+48 600 100 200",
            "service_id": self.service["id"],
            "notes": "Strange noise when braking",
        }
        payload.update(overrides)
        return payload

    async def _book(self, **overrides):
        response = await self.client.post("/api/appointments/", json=self._booking(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    async def test_1_booking_starts_pending(self):
        appointment = await self._book(status="completed")
        self.assertEqual(appointment["status"], "pending")
        self.assertEqual(appointment["service_id"], self.service["id"])
        self.assertEqual(appointment["date"], "2026-11-03")

    async def test_2_email_is_optional(self):
        appointment = await self._book(client_email="")
        self.assertIsNone(appointment["client_email"])

        response = await self.client.post(
            "/api/appointments/", json=self._booking(client_email="not-an-email")
        )
        self.assertEqual(response.status_code, 400)

    async def test_3_unknown_service_rejected(self):
        response = await self.client.post(
            "/api/appointments/", json=self._booking(service_id="missing")
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "VALIDATION_ERROR")

    async def test_4_malformed_date_and_time_rejected(self):
        for overrides in ({"date": "03/11/2026"}, {"time": "25:00"}, {"time": "9am"}, {"client_phone": ""}):
            response = await self.client.post("/api/appointments/", json=self._booking(**overrides))
            self.assertEqual(response.status_code, 400, overrides)

    async def test_5_double_booking_is_allowed(self):
        await self._book()
        await self._book(client_name="Anna Nowak")
        response = await self.client.get("/api/appointments/")
        self.assertEqual(len(response.json()), 2)

    async def test_6_any_status_transition(self):
        appointment = await self._book()
        url = f"/api/appointments/{appointment['id']}"
        for new_status in ("completed", "pending", "cancelled", "confirmed"):
            response = await self.client.put(url, json={"status": new_status})
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["status"], new_status)

        response = await self.client.put(url, json={"status": "archived"})
        self.assertEqual(response.status_code, 400)

    async def test_7_list_filtered_and_ordered(self):
        late = await self._book(date="2026-11-05", time="09:00")
        early = await self._book(date="2026-11-04", time="16:30")
        await self.client.put(f"/api/appointments/{late['id']}", json={"status": "confirmed"})

        response = await self.client.get("/api/appointments/")
        self.assertEqual([a["id"] for a in response.json()], [early["id"], late["id"]])

        response = await self.client.get("/api/appointments/", params={"status": "confirmed"})
        self.assertEqual([a["id"] for a in response.json()], [late["id"]])

    async def test_8_delete_and_missing(self):
        appointment = await self._book()
        response = await self.client.delete(f"/api/appointments/{appointment['id']}")
        self.assertEqual(response.status_code, 204)
        response = await self.client.get(f"/api/appointments/{appointment['id']}")
        self.assertEqual(response.status_code, 404)

    async def test_9_deleting_service_keeps_appointment(self):
        appointment = await self._book()
        response = await self.client.delete(f"/api/services/{self.service['id']}")
        self.assertEqual(response.status_code, 204)

        response = await self.client.get(f"/api/appointments/{appointment['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["service_id"])

    async def test_10_blank_email_cleared_on_edit(self):
        appointment = await self._book()
        response = await self.client.put(
            f"/api/appointments/{appointment['id']}", json={"client_email": ""}
        )
        self.assertEqual(response.status_code, 200, response.text)
        self.assertIsNone(response.json()["client_email"])
        self.assertEqual(response.json()["client_name"], "Jan Kowalski")


if __name__ == "__main__":
    unittest.main()
