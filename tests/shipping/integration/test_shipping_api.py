"""Integration tests for Shipping API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from notifications.directory import get_directory
from shared.api import register_exception_handlers
from shipping.api.routes import router
from tests.support.factories import customer_data, order_payload


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


def _create_order(client, **overrides):
    response = client.post("/api/orders", json=order_payload(**overrides))
    assert response.status_code == 201
    return response.json()


class TestCreateOrder:
    def test_create_returns_summary(self, client):
        body = _create_order(client, package_type="electronics", priority="express")
        assert body["order_id"].startswith("ORD-")
        assert body["tracking_id"].startswith("TRK")
        assert body["status"] == "created"
        assert body["package_type"] == "electronics"
        assert body["priority"] == "express"

    def test_create_registers_customer_contact(self, client):
        customer = customer_data(customer_id="cust-api-001", phone=None)
        _create_order(client, customer=customer)
        contact = get_directory().get_contact("cust-api-001")
        assert contact.email == customer["email"]
        assert contact.phone is None

    def test_invalid_payload_is_400(self, client):
        payload = order_payload()
        payload["delivery_address"] = ""
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 400
        assert "delivery_address" in response.json()["error"]


class TestReadOrders:
    def test_get_order(self, client):
        created = _create_order(client)
        response = client.get(f"/api/orders/{created['order_id']}")
        assert response.status_code == 200
        body = response.json()
        assert body["tracking_id"] == created["tracking_id"]
        assert body["timeline"][0]["status"] == "Order Placed"
        assert body["timeline"][0]["location"] == "Online Platform"

    def test_get_unknown_order_is_404(self, client):
        response = client.get("/api/orders/ORD-DOESNOTEXIST")
        assert response.status_code == 404
        assert response.json()["error"] == "Order not found: ORD-DOESNOTEXIST"

    def test_list_orders_paginates(self, client):
        for _ in range(3):
            _create_order(client)
        response = client.get("/api/orders", params={"page": 1, "limit": 2})
        assert response.status_code == 200
        body = response.json()
        assert len(body["orders"]) == 2
        assert body["pagination"] == {"page": 1, "limit": 2, "total": 3, "total_pages": 2}

    def test_list_with_bad_limit_is_400(self, client):
        response = client.get("/api/orders", params={"limit": 0})
        assert response.status_code == 400

    def test_list_with_unknown_status_is_400(self, client):
        response = client.get("/api/orders", params={"status": "misplaced"})
        assert response.status_code == 400


class TestUpdateStatus:
    def test_patch_status(self, client):
        created = _create_order(client)
        response = client.patch(
            f"/api/orders/{created['order_id']}/status",
            json={"status": "out_for_delivery", "location": "Harlem Depot"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "out_for_delivery"
        assert response.json()["location"] == "Harlem Depot"

        order = client.get(f"/api/orders/{created['order_id']}").json()
        assert order["timeline"][-1]["status"] == "Out For Delivery"

    def test_patch_unknown_order_is_404(self, client):
        response = client.patch("/api/orders/ORD-NOPE/status", json={"status": "delivered"})
        assert response.status_code == 404

    def test_patch_unknown_status_is_400(self, client):
        created = _create_order(client)
        response = client.patch(f"/api/orders/{created['order_id']}/status", json={"status": "vanished"})
        assert response.status_code == 400


class TestTrackingAndAnalytics:
    def test_track_new_order(self, client):
        created = _create_order(client)
        response = client.get(f"/api/tracking/{created['tracking_id']}")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "created"
        assert body["current_location"]["address"] == "Processing Center"
        assert body["current_location"]["coordinates"] == {"lat": 40.7128, "lng": -74.006}

    def test_track_unknown_is_404(self, client):
        response = client.get("/api/tracking/TRKUNKNOWN")
        assert response.status_code == 404
        assert "Tracking ID not found" in response.json()["error"]

    def test_analytics(self, client):
        first = _create_order(client)
        _create_order(client)
        client.patch(f"/api/orders/{first['order_id']}/status", json={"status": "delivered"})
        body = client.get("/api/analytics").json()
        assert body["total_orders"] == 2
        assert body["delivered_orders"] == 1
        assert body["pending_orders"] == 1


class TestOptimizeRoute:
    def test_sequences_orders(self, client):
        first = _create_order(client)
        second = _create_order(client)
        response = client.post("/api/optimize-route", json={"order_ids": [first["order_id"], second["order_id"]]})
        assert response.status_code == 200
        body = response.json()
        assert [stop["sequence_number"] for stop in body["stops"]] == [1, 2]
        assert body["stops"][0]["order_id"] == first["order_id"]
        assert body["stops"][1]["estimated_minutes"] == 25
        assert body["total_distance_miles"] == 6.4
        assert body["efficiency_percent"] == 76

    def test_empty_route_is_400(self, client):
        response = client.post("/api/optimize-route", json={"order_ids": []})
        assert response.status_code == 400

    def test_unknown_order_is_404(self, client):
        response = client.post("/api/optimize-route", json={"order_ids": ["ORD-NOPE"]})
        assert response.status_code == 404
