"""Tracking record: customer-facing projection of an order, keyed by tracking id."""

from pydantic import BaseModel

from shipping.order.order import Order, OrderStatus


class Coordinates(BaseModel):
    lat: float
    lng: float


class CurrentLocation(BaseModel):
    address: str
    coordinates: Coordinates | None = None


PROCESSING_CENTER = CurrentLocation(
    address="Processing Center",
    coordinates=Coordinates(lat=40.7128, lng=-74.0060),
)


class TrackingRecord(BaseModel):
    tracking_id: str
    order_id: str
    status: OrderStatus
    current_location: CurrentLocation
    location_reported: bool = False

    @classmethod
    def for_order(cls, order: Order) -> "TrackingRecord":
        return cls(
            tracking_id=order.tracking_id,
            order_id=order.order_id,
            status=order.status,
            current_location=PROCESSING_CENTER.model_copy(deep=True),
        )

    def refresh(self, order: Order, location: str | None = None) -> None:
        """Mirror the order's authoritative status, and its reported location if any."""
        self.status = order.status
        if location:
            self.current_location = CurrentLocation(address=location)
            self.location_reported = True
