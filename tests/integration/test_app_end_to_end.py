"""End-to-end tests through the assembled application."""

from datetime import UTC, datetime, timedelta

import pytest
from app import app
from fastapi.testclient import TestClient
from impact.analysis.readings import Severity
from impact.signals import get_signal_source
from notifications.channel import get_channel
from notifications.notification.notification import NotificationChannel
from shipping.order.lifecycle import get_tracking_by_tracking_id
from tests.support.factories import customer_data, order_payload, weather_reading


@pytest.fixture()
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"
        assert response.json()["adapters"] == {"storage": "memory", "signals": "fake"}

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client):
        assert client.get("/health").headers["X-Request-ID"]


class TestOrderToNotification:
    def test_weather_event_reaches_the_customer(self, client):
        customer = customer_data(phone=None, email="rider@example.com")
        created = client.post(
            "/api/orders",
            json=order_payload(customer=customer, delivery_address="11 Broadway, Manhattan"),
        ).json()

        get_signal_source().script_weather([weather_reading("Manhattan", impact_level=Severity.HIGH)])
        impact = client.post("/api/impact/weather", json={"locations": ["Manhattan"]}).json()
        assert impact["actions"]["updated_orders"] == [created["order_id"]]

        tracking = client.get(f"/api/tracking/{created['tracking_id']}").json()
        assert tracking["status"] == "delayed"
        assert tracking["timeline"][-1]["status"] == "Delayed"

        email = get_channel(NotificationChannel.EMAIL)
        assert email.sent_emails[0]["to"] == "rider@example.com"
        assert email.sent_emails[0]["subject"] == "Delivery Delayed - Smart Logistics"
        assert get_channel(NotificationChannel.SMS).attempts == 0

        history = client.get(f"/api/notifications/orders/{created['order_id']}").json()
        assert [e["notification_type"] for e in history["entries"]] == ["delivery_delayed"]

    def test_tracking_progresses_with_time(self, client):
        created = client.post("/api/orders", json=order_payload()).json()
        created_at = datetime.fromisoformat(created["created_at"])
        view = get_tracking_by_tracking_id(created["tracking_id"], now=created_at + timedelta(minutes=13))
        assert [e.status for e in view.timeline] == ["Order Placed", "Picked Up", "In Transit"]
        assert created_at.tzinfo is not None
        assert created_at <= datetime.now(UTC)
