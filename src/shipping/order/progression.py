"""Tracking progression: derives display status from time elapsed since creation.

The projection is computed on read and never written back; the stored order
status stays authoritative. It only advances orders whose stored status is
one of the simulated stages, and never moves a status backwards.

    elapsed < pickup_after                  → created
    pickup_after <= elapsed < transit_after → picked_up  (+ "Picked Up" event)
    elapsed >= transit_after                → in_transit (+ "In Transit" event)
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from pydantic import BaseModel

from shipping.order.order import Order, OrderStatus, TimelineEvent, timeline_title
from shipping.order.tracking import Coordinates, CurrentLocation, TrackingRecord

PICKUP_AFTER = timedelta(minutes=6)
TRANSIT_AFTER = timedelta(minutes=12)

_STAGE_RANK = {
    OrderStatus.CREATED: 0,
    OrderStatus.PICKED_UP: 1,
    OrderStatus.IN_TRANSIT: 2,
}

PICKUP_LOCATION = CurrentLocation(
    address="Pickup Location",
    coordinates=Coordinates(lat=40.7589, lng=-73.9851),
)
DISTRIBUTION_CENTER = CurrentLocation(
    address="Distribution Center - Manhattan",
    coordinates=Coordinates(lat=40.7282, lng=-73.7949),
)


@dataclass(frozen=True)
class _Stage:
    status: OrderStatus
    after: timedelta
    location: CurrentLocation


class TrackingProjection(BaseModel):
    tracking_id: str
    order_id: str
    status: OrderStatus
    current_location: CurrentLocation
    estimated_delivery: datetime
    timeline: list[TimelineEvent]


def project(
    order: Order,
    tracking: TrackingRecord,
    now: datetime | None = None,
    pickup_after: timedelta = PICKUP_AFTER,
    transit_after: timedelta = TRANSIT_AFTER,
) -> TrackingProjection:
    """Project the tracking view of ``order`` at ``now``. Pure and idempotent."""
    now = now or datetime.now(UTC)
    status = order.status
    location = tracking.current_location
    timeline = [event.model_copy() for event in order.timeline]

    if status in _STAGE_RANK:
        elapsed = now - order.created_at
        stages = (
            _Stage(OrderStatus.PICKED_UP, pickup_after, PICKUP_LOCATION),
            _Stage(OrderStatus.IN_TRANSIT, transit_after, DISTRIBUTION_CENTER),
        )
        for stage in stages:
            if elapsed < stage.after:
                break
            if _STAGE_RANK[stage.status] <= _STAGE_RANK[status]:
                continue

            status = stage.status
            if not tracking.location_reported:
                location = stage.location

            title = timeline_title(stage.status)
            if not order.has_event(title):
                timeline.append(
                    TimelineEvent(
                        status=title,
                        timestamp=order.created_at + stage.after,
                        location=stage.location.address,
                    )
                )

    timeline.sort(key=lambda event: event.timestamp)

    return TrackingProjection(
        tracking_id=tracking.tracking_id,
        order_id=order.order_id,
        status=status,
        current_location=location.model_copy(deep=True),
        estimated_delivery=order.estimated_delivery,
        timeline=timeline,
    )
