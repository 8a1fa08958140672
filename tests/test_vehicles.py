from tests.base import ApiTestCase


class TestVehicles(ApiTestCase):
    def create(self, **fields):
        body = {"name": "City Sedan", "vehicle_type": "sedan", "capacity": 4, "price_per_km": 12.5}
        body.update(fields)
        return self.client.post("/api/vehicles", json=body)

    def vehicle(self, vehicle_id):
        return next(v for v in self.client.get("/api/vehicles").json() if v["id"] == vehicle_id)

    def test_create_defaults_to_available(self):
        response = self.create()
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["message"], "Vehicle created successfully")

        vehicle = self.vehicle(data["vehicleId"])
        self.assertTrue(vehicle["is_available"])
        self.assertIsNone(vehicle["description"])
        self.assertEqual(vehicle["capacity"], 4)
        self.assertEqual(vehicle["price_per_km"], 12.5)

    def test_create_unavailable(self):
        vehicle_id = self.create(is_available=False, description="In the shop").json()["vehicleId"]
        vehicle = self.vehicle(vehicle_id)
        self.assertFalse(vehicle["is_available"])
        self.assertEqual(vehicle["description"], "In the shop")

    def test_numeric_strings_accepted(self):
        response = self.create(capacity="6", price_per_km="9.75")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.vehicle(response.json()["vehicleId"])["capacity"], 6)

    def test_missing_fields(self):
        for field in ("name", "vehicle_type", "capacity", "price_per_km"):
            response = self.create(**{field: None})
            self.assertEqual(response.status_code, 400, field)
            self.assertEqual(response.json()["error"], "Missing required fields")
        self.assertEqual(self.create(capacity=0).status_code, 400)
        self.assertEqual(self.client.get("/api/vehicles").json(), [])

    def test_update_availability_only(self):
        vehicle_id = self.create().json()["vehicleId"]
        response = self.client.put(f"/api/vehicles/{vehicle_id}", json={"is_available": False, "name": "Renamed"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Vehicle updated successfully")

        vehicle = self.vehicle(vehicle_id)
        self.assertFalse(vehicle["is_available"])
        self.assertEqual(vehicle["name"], "City Sedan")

    def test_update_requires_availability(self):
        vehicle_id = self.create().json()["vehicleId"]
        response = self.client.put(f"/api/vehicles/{vehicle_id}", json={"name": "Renamed"})
        self.assertEqual(response.status_code, 400)

    def test_delete(self):
        vehicle_id = self.create().json()["vehicleId"]
        response = self.client.delete(f"/api/vehicles/{vehicle_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Vehicle deleted successfully")
        self.assertEqual(self.client.get("/api/vehicles").json(), [])

    def test_delete_unknown_vehicle_succeeds(self):
        self.assertEqual(self.client.delete("/api/vehicles/9999").status_code, 200)

    def test_non_numeric_id_matches_nothing(self):
        vehicle_id = self.create().json()["vehicleId"]
        self.assertEqual(self.client.put("/api/vehicles/abc", json={"is_available": False}).status_code, 200)
        self.assertEqual(self.client.delete("/api/vehicles/abc").status_code, 200)
        self.assertTrue(self.vehicle(vehicle_id)["is_available"])

    def test_store_failures(self):
        self.use_broken_store()
        self.assertEqual(self.client.get("/api/vehicles").json(), {"error": "Failed to fetch vehicles"})
        self.assertEqual(self.create().json(), {"error": "Failed to create vehicle"})
        self.assertEqual(
            self.client.put("/api/vehicles/1", json={"is_available": True}).json(),
            {"error": "Failed to update vehicle"},
        )
        response = self.client.delete("/api/vehicles/1")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to delete vehicle"})
