"""Tests for the Order aggregate: creation, transitions and timeline invariants."""

import re
from datetime import UTC, datetime, timedelta

import pytest
from shared.errors import ValidationError
from shipping.order.order import (
    ORDER_PLACED,
    ORDER_PLACED_LOCATION,
    SYSTEM_UPDATE_LOCATION,
    Customer,
    Order,
    OrderPayload,
    OrderStatus,
    PackageType,
    Priority,
    generate_order_id,
    generate_tracking_id,
    timeline_title,
)

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)


def _payload(**overrides):
    data = {
        "customer": Customer(customer_id="cust-001", name="Ada Lovelace", email="ada@example.com"),
        "pickup_address": "12 Warehouse Row, Brooklyn",
        "delivery_address": "500 5th Ave, Manhattan",
        "package_type": PackageType.ELECTRONICS,
    }
    data.update(overrides)
    return OrderPayload(**data)


def _make_order(now=T0):
    return Order.create(
        _payload(),
        order_id="ORD-TEST00000001",
        tracking_id="TRKTEST00001",
        delivery_window=timedelta(hours=24),
        now=now,
    )


class TestOrderCreation:
    def test_new_order_is_created(self):
        order = _make_order()
        assert order.status == OrderStatus.CREATED
        assert order.version == 1
        assert order.delay_reason is None

    def test_first_event_is_order_placed(self):
        order = _make_order()
        assert len(order.timeline) == 1
        assert order.timeline[0].status == ORDER_PLACED
        assert order.timeline[0].location == ORDER_PLACED_LOCATION
        assert order.timeline[0].timestamp == T0

    def test_estimated_delivery_is_one_window_out(self):
        order = _make_order()
        assert order.estimated_delivery == T0 + timedelta(hours=24)
        assert order.created_at == order.updated_at == T0

    def test_priority_defaults_to_standard(self):
        assert _make_order().priority == Priority.STANDARD

    def test_payload_requires_delivery_address(self):
        with pytest.raises(Exception):
            _payload(delivery_address="")

    def test_payload_rejects_unknown_package_type(self):
        with pytest.raises(Exception):
            _payload(package_type="piano")


class TestIdentifiers:
    def test_order_id_format(self):
        assert re.fullmatch(r"ORD-[0-9A-F]{12}", generate_order_id())

    def test_tracking_id_format(self):
        assert re.fullmatch(r"TRK[0-9A-F]{9}", generate_tracking_id())

    def test_generated_ids_differ(self):
        assert len({generate_order_id() for _ in range(200)}) == 200


class TestTimelineTitle:
    @pytest.mark.parametrize(
        "status,title",
        [
            (OrderStatus.PICKED_UP, "Picked Up"),
            (OrderStatus.IN_TRANSIT, "In Transit"),
            (OrderStatus.OUT_FOR_DELIVERY, "Out For Delivery"),
            (OrderStatus.DELIVERY_FAILED, "Delivery Failed"),
            (OrderStatus.DELIVERED, "Delivered"),
        ],
    )
    def test_all_underscores_become_spaces(self, status, title):
        assert timeline_title(status) == title


class TestTransitions:
    def test_transition_appends_one_event(self):
        order = _make_order()
        order.transition_to(OrderStatus.IN_TRANSIT, location="Queens Hub", now=T0 + timedelta(hours=1))
        assert order.status == OrderStatus.IN_TRANSIT
        assert len(order.timeline) == 2
        assert order.timeline[-1].status == "In Transit"
        assert order.timeline[-1].location == "Queens Hub"

    def test_location_defaults_to_system_update(self):
        order = _make_order()
        order.transition_to(OrderStatus.DELIVERED, now=T0 + timedelta(hours=1))
        assert order.timeline[-1].location == SYSTEM_UPDATE_LOCATION

    def test_transition_sets_updated_at_and_bumps_version(self):
        order = _make_order()
        later = T0 + timedelta(hours=2)
        order.transition_to(OrderStatus.PICKED_UP, now=later)
        assert order.updated_at == later
        assert order.version == 2

    def test_delay_records_reason_and_pushes_eta(self):
        order = _make_order()
        order.transition_to(
            OrderStatus.DELAYED,
            reason="weather_delay",
            delay=timedelta(hours=4),
            now=T0 + timedelta(hours=1),
        )
        assert order.delay_reason == "weather_delay"
        assert order.estimated_delivery == T0 + timedelta(hours=28)

    def test_skewed_clock_never_precedes_creation(self):
        order = _make_order()
        order.transition_to(OrderStatus.PICKED_UP, now=T0 - timedelta(minutes=30))
        assert order.timeline[-1].timestamp == T0
        assert order.timeline[0].status == ORDER_PLACED

    def test_timeline_stays_sorted(self):
        order = _make_order()
        order.transition_to(OrderStatus.PICKED_UP, now=T0 + timedelta(hours=3))
        order.transition_to(OrderStatus.IN_TRANSIT, now=T0 + timedelta(hours=1))
        timestamps = [event.timestamp for event in order.timeline]
        assert timestamps == sorted(timestamps)
        assert order.timeline[0].status == ORDER_PLACED

    def test_permissive_mode_allows_any_jump(self):
        order = _make_order()
        order.transition_to(OrderStatus.DELIVERED, now=T0 + timedelta(hours=1))
        order.transition_to(OrderStatus.CREATED, now=T0 + timedelta(hours=2))
        assert order.status == OrderStatus.CREATED

    def test_has_event(self):
        order = _make_order()
        order.transition_to(OrderStatus.PICKED_UP, now=T0 + timedelta(minutes=10))
        assert order.has_event("Picked Up")
        assert not order.has_event("In Transit")


class TestStrictTransitions:
    def test_valid_lifecycle_path(self):
        order = _make_order()
        for step, status in enumerate(
            [
                OrderStatus.PICKED_UP,
                OrderStatus.IN_TRANSIT,
                OrderStatus.OUT_FOR_DELIVERY,
                OrderStatus.DELIVERED,
            ],
            start=1,
        ):
            order.transition_to(status, now=T0 + timedelta(hours=step), strict=True)
        assert order.status == OrderStatus.DELIVERED

    def test_cannot_skip_to_delivered(self):
        order = _make_order()
        with pytest.raises(ValidationError) as exc:
            order.transition_to(OrderStatus.DELIVERED, strict=True)
        assert "Cannot transition from created to delivered" in exc.value.messages["status"][0]
        assert order.status == OrderStatus.CREATED
        assert len(order.timeline) == 1

    def test_delivered_is_terminal(self):
        order = _make_order()
        order.transition_to(OrderStatus.DELIVERED, now=T0 + timedelta(hours=1))
        with pytest.raises(ValidationError):
            order.transition_to(OrderStatus.DELAYED, strict=True)

    def test_delayed_order_resumes(self):
        order = _make_order()
        order.transition_to(OrderStatus.DELAYED, now=T0 + timedelta(hours=1), strict=True)
        order.transition_to(OrderStatus.IN_TRANSIT, now=T0 + timedelta(hours=2), strict=True)
        assert order.status == OrderStatus.IN_TRANSIT

    def test_failed_delivery_can_be_retried(self):
        order = _make_order()
        order.transition_to(OrderStatus.OUT_FOR_DELIVERY, now=T0 + timedelta(hours=1))
        order.transition_to(OrderStatus.DELIVERY_FAILED, now=T0 + timedelta(hours=2), strict=True)
        order.transition_to(OrderStatus.OUT_FOR_DELIVERY, now=T0 + timedelta(hours=3), strict=True)
        assert order.status == OrderStatus.OUT_FOR_DELIVERY
