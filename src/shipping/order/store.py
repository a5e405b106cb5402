"""Order Store: keyed persistence for orders and their tracking records.

The store is the only shared mutable resource. Mutations of a single order
are serialized by a per-order lock that covers the read-modify-write of the
order and its tracking record. Cross-order reads take no lock.
"""

import threading
from collections import Counter
from datetime import UTC, datetime, timedelta

import pydantic
import structlog

from shared.errors import OrderNotFound, TrackingNotFound, ValidationError
from shipping.order.order import (
    Order,
    OrderPayload,
    OrderStatus,
    generate_order_id,
    generate_tracking_id,
)
from shipping.order.tracking import TrackingRecord
from shipping.storage.port import KeyValueBackend

logger = structlog.get_logger(__name__)

ORDERS = "orders"
TRACKING = "tracking"


def parse_status(status: OrderStatus | str) -> OrderStatus:
    """Coerce a status string into ``OrderStatus``, raising ValidationError if unknown."""
    if isinstance(status, OrderStatus):
        return status
    try:
        return OrderStatus(status)
    except ValueError:
        raise ValidationError({"status": [f"Unknown order status: {status}"]}) from None


def _validation_messages(exc: pydantic.ValidationError) -> dict[str, list[str]]:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "payload"
        messages.setdefault(field, []).append(error["msg"])
    return messages


class OrderStore:
    def __init__(
        self,
        backend: KeyValueBackend,
        delivery_window: timedelta = timedelta(hours=24),
        strict_transitions: bool = False,
    ):
        self._backend = backend
        self._delivery_window = delivery_window
        self._strict_transitions = strict_transitions
        self._create_lock = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, order_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(order_id, threading.Lock())

    def _fresh_id(self, namespace: str, generate) -> str:
        # Orders are never deleted, so an id absent from the backend was never issued
        while True:
            candidate = generate()
            if self._backend.get(namespace, candidate) is None:
                return candidate

    # -------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------
    def create(self, payload: OrderPayload | dict, now: datetime | None = None) -> Order:
        """Create an order and its tracking record in one atomic write."""
        if not isinstance(payload, OrderPayload):
            try:
                payload = OrderPayload.model_validate(payload)
            except pydantic.ValidationError as exc:
                raise ValidationError(_validation_messages(exc)) from exc

        with self._create_lock:
            order = Order.create(
                payload,
                order_id=self._fresh_id(ORDERS, generate_order_id),
                tracking_id=self._fresh_id(TRACKING, generate_tracking_id),
                delivery_window=self._delivery_window,
                now=now,
            )
            tracking = TrackingRecord.for_order(order)
            self._backend.put_many(
                [
                    (ORDERS, order.order_id, order),
                    (TRACKING, tracking.tracking_id, tracking),
                ]
            )

        logger.info(
            "Order created",
            order_id=order.order_id,
            tracking_id=order.tracking_id,
            new_status=order.status.value,
            timestamp=order.created_at.isoformat(),
        )
        return order

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def get(self, order_id: str) -> Order:
        order = self._backend.get(ORDERS, order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def get_by_tracking_id(self, tracking_id: str) -> tuple[Order, TrackingRecord]:
        tracking = self._backend.get(TRACKING, tracking_id)
        if tracking is None:
            raise TrackingNotFound(tracking_id)
        order = self._backend.get(ORDERS, tracking.order_id)
        if order is None:
            raise TrackingNotFound(tracking_id)
        return order, tracking

    def find_by_delivery_address(self, fragment: str) -> list[str]:
        """Return ids of orders whose delivery address contains ``fragment``."""
        if not fragment:
            return []
        return [o.order_id for o in self._backend.scan(ORDERS, lambda o: fragment in o.delivery_address)]

    def status_counts(self) -> dict[OrderStatus, int]:
        counts = Counter(o.status for o in self._backend.scan(ORDERS))
        return {status: counts.get(status, 0) for status in OrderStatus}

    # -------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------
    def update_status(
        self,
        order_id: str,
        new_status: OrderStatus | str,
        location: str | None = None,
        reason: str | None = None,
        delay: timedelta | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Transition an order and mirror the change into its tracking record."""
        new_status = parse_status(new_status)

        with self._lock_for(order_id):
            order = self.get(order_id)
            prior_status = order.status
            order.transition_to(
                new_status,
                location=location,
                reason=reason,
                delay=delay,
                now=now or datetime.now(UTC),
                strict=self._strict_transitions,
            )

            tracking = self._backend.get(TRACKING, order.tracking_id) or TrackingRecord.for_order(order)
            tracking.refresh(order, location)
            self._backend.put_many(
                [
                    (ORDERS, order.order_id, order),
                    (TRACKING, tracking.tracking_id, tracking),
                ]
            )

        logger.info(
            "Order status updated",
            order_id=order_id,
            prior_status=prior_status.value,
            new_status=new_status.value,
            location=location,
            reason=reason,
            timestamp=order.updated_at.isoformat(),
        )
        return order

    # Defined last: the method name shadows the builtin for annotations below it
    def list(
        self,
        status: OrderStatus | str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Order], int]:
        """Return one 1-indexed page of orders (oldest first) and the filtered total."""
        if page < 1:
            raise ValidationError({"page": ["Page must be at least 1"]})
        if limit < 1:
            raise ValidationError({"limit": ["Limit must be at least 1"]})

        wanted = parse_status(status) if status is not None else None
        orders = self._backend.scan(ORDERS, lambda o: wanted is None or o.status == wanted)
        orders.sort(key=lambda o: o.created_at)

        start = (page - 1) * limit
        return orders[start : start + limit], len(orders)
