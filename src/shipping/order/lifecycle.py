"""Order lifecycle operations: the entry points used by the API layer.

Thin orchestration over the Order Store; tracking reads apply the
progression simulator before returning.
"""

import math
from datetime import datetime, timedelta

from pydantic import BaseModel

from shared.config import get_settings
from shipping.domain import get_order_store
from shipping.order.order import Order, OrderPayload, OrderStatus
from shipping.order.progression import TrackingProjection, project
from shipping.order.routing import RoutePlan, plan_route


class OrderPage(BaseModel):
    items: list[Order]
    page: int
    limit: int
    total: int
    total_pages: int


def create_order(payload: OrderPayload | dict, now: datetime | None = None) -> Order:
    return get_order_store().create(payload, now=now)


def get_order(order_id: str) -> Order:
    return get_order_store().get(order_id)


def get_tracking_by_tracking_id(tracking_id: str, now: datetime | None = None) -> TrackingProjection:
    """Look up a tracking record and project its progress at ``now``."""
    settings = get_settings()
    order, tracking = get_order_store().get_by_tracking_id(tracking_id)
    return project(
        order,
        tracking,
        now=now,
        pickup_after=timedelta(minutes=settings.PICKUP_AFTER_MINUTES),
        transit_after=timedelta(minutes=settings.TRANSIT_AFTER_MINUTES),
    )


def list_orders(status: OrderStatus | str | None = None, page: int = 1, limit: int = 10) -> OrderPage:
    items, total = get_order_store().list(status=status, page=page, limit=limit)
    return OrderPage(
        items=items,
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )


def update_order_status(order_id: str, status: OrderStatus | str, location: str | None = None) -> Order:
    return get_order_store().update_status(order_id, status, location=location)


def order_analytics() -> dict[str, int]:
    """Order counts by lifecycle bucket."""
    counts = get_order_store().status_counts()
    return {
        "total_orders": sum(counts.values()),
        "delivered_orders": counts[OrderStatus.DELIVERED],
        "in_transit_orders": counts[OrderStatus.IN_TRANSIT],
        "pending_orders": counts[OrderStatus.CREATED],
        "delayed_orders": counts[OrderStatus.DELAYED],
        "failed_orders": counts[OrderStatus.DELIVERY_FAILED],
    }


def plan_delivery_route(order_ids: list[str]) -> RoutePlan:
    """Sequence the given orders into a delivery route.

    Raises:
        OrderNotFound: any id is unknown.
    """
    store = get_order_store()
    return plan_route([store.get(order_id) for order_id in order_ids])
