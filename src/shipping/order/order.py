"""Order aggregate: the authoritative record of a shipment.

Every status change appends exactly one timeline event. The first timeline
event is always "Order Placed" and timestamps never run backwards.

Lifecycle (strict mode only; the default is permissive):
    CREATED → PICKED_UP → IN_TRANSIT → OUT_FOR_DELIVERY → DELIVERED
    {CREATED, PICKED_UP, IN_TRANSIT, OUT_FOR_DELIVERY, DELAYED} → DELAYED
    DELAYED → {PICKED_UP, IN_TRANSIT, OUT_FOR_DELIVERY}
    OUT_FOR_DELIVERY → DELIVERY_FAILED → {OUT_FOR_DELIVERY, DELAYED}
"""

from datetime import UTC, datetime, timedelta
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from shared.errors import ValidationError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    CREATED = "created"
    PICKED_UP = "picked_up"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    DELAYED = "delayed"
    DELIVERY_FAILED = "delivery_failed"


class PackageType(Enum):
    DOCUMENT = "document"
    FRAGILE = "fragile"
    STANDARD = "standard"
    HEAVY = "heavy"
    ELECTRONICS = "electronics"
    FOOD = "food"


class Priority(Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    URGENT = "urgent"


ORDER_PLACED = "Order Placed"
ORDER_PLACED_LOCATION = "Online Platform"
SYSTEM_UPDATE_LOCATION = "System Update"

_VALID_TRANSITIONS = {
    OrderStatus.CREATED: {OrderStatus.PICKED_UP, OrderStatus.DELAYED},
    OrderStatus.PICKED_UP: {OrderStatus.IN_TRANSIT, OrderStatus.DELAYED},
    OrderStatus.IN_TRANSIT: {OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELAYED},
    OrderStatus.OUT_FOR_DELIVERY: {
        OrderStatus.DELIVERED,
        OrderStatus.DELIVERY_FAILED,
        OrderStatus.DELAYED,
    },
    OrderStatus.DELAYED: {
        OrderStatus.PICKED_UP,
        OrderStatus.IN_TRANSIT,
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELAYED,
    },
    OrderStatus.DELIVERY_FAILED: {OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELAYED},
    OrderStatus.DELIVERED: set(),  # terminal
}


def timeline_title(status: OrderStatus) -> str:
    """Human-readable timeline title, e.g. ``out_for_delivery`` → ``Out For Delivery``."""
    return status.value.replace("_", " ").title()


def generate_order_id() -> str:
    return f"ORD-{uuid4().hex[:12].upper()}"


def generate_tracking_id() -> str:
    return f"TRK{uuid4().hex[:9].upper()}"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
class Customer(BaseModel):
    customer_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str | None = None
    phone: str | None = None


class TimelineEvent(BaseModel):
    status: str
    timestamp: datetime
    location: str


class OrderPayload(BaseModel):
    """Business payload supplied by the caller at creation time."""

    customer: Customer
    pickup_address: str = Field(min_length=1)
    delivery_address: str = Field(min_length=1)
    package_type: PackageType
    priority: Priority = Priority.STANDARD
    special_instructions: str | None = None


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
class Order(BaseModel):
    order_id: str
    tracking_id: str
    status: OrderStatus = OrderStatus.CREATED
    timeline: list[TimelineEvent] = Field(default_factory=list)

    customer: Customer
    pickup_address: str
    delivery_address: str
    package_type: PackageType
    priority: Priority
    special_instructions: str | None = None

    delay_reason: str | None = None
    version: int = 1

    created_at: datetime
    updated_at: datetime
    estimated_delivery: datetime

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        payload: OrderPayload,
        order_id: str,
        tracking_id: str,
        delivery_window: timedelta,
        now: datetime | None = None,
    ) -> "Order":
        """Create a new order in CREATED status with its "Order Placed" event."""
        now = now or datetime.now(UTC)
        return cls(
            order_id=order_id,
            tracking_id=tracking_id,
            status=OrderStatus.CREATED,
            timeline=[TimelineEvent(status=ORDER_PLACED, timestamp=now, location=ORDER_PLACED_LOCATION)],
            customer=payload.customer,
            pickup_address=payload.pickup_address,
            delivery_address=payload.delivery_address,
            package_type=payload.package_type,
            priority=payload.priority,
            special_instructions=payload.special_instructions,
            created_at=now,
            updated_at=now,
            estimated_delivery=now + delivery_window,
        )

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status: OrderStatus) -> None:
        if target_status not in _VALID_TRANSITIONS.get(self.status, set()):
            raise ValidationError(
                {"status": [f"Cannot transition from {self.status.value} to {target_status.value}"]}
            )

    def transition_to(
        self,
        status: OrderStatus,
        location: str | None = None,
        reason: str | None = None,
        delay: timedelta | None = None,
        now: datetime | None = None,
        strict: bool = False,
    ) -> None:
        """Move the order to ``status`` and append the matching timeline event."""
        if strict:
            self._assert_can_transition(status)

        # Timestamps never precede creation, even with a skewed caller clock
        now = max(now or datetime.now(UTC), self.created_at)

        self.status = status
        self.timeline.append(
            TimelineEvent(
                status=timeline_title(status),
                timestamp=now,
                location=location or SYSTEM_UPDATE_LOCATION,
            )
        )
        self.timeline.sort(key=lambda event: event.timestamp)
        if reason is not None:
            self.delay_reason = reason
        if delay is not None:
            self.estimated_delivery = self.estimated_delivery + delay
        self.updated_at = now
        self.version += 1

    def has_event(self, title: str) -> bool:
        return any(event.status == title for event in self.timeline)
