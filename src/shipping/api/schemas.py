"""Pydantic request/response schemas for the Shipping API.

These are external contracts, kept separate from the Order aggregate.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from shipping.order.order import Order, PackageType, Priority


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CustomerSchema(BaseModel):
    customer_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str | None = None
    phone: str | None = None


class TimelineEventSchema(BaseModel):
    status: str
    timestamp: datetime
    location: str


class CoordinatesSchema(BaseModel):
    lat: float
    lng: float


class LocationSchema(BaseModel):
    address: str
    coordinates: CoordinatesSchema | None = None


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    customer: CustomerSchema
    pickup_address: str = Field(min_length=1)
    delivery_address: str = Field(min_length=1)
    package_type: PackageType
    priority: Priority = Priority.STANDARD
    special_instructions: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer": {
                        "customer_id": "cust-001",
                        "name": "Ada Lovelace",
                        "email": "ada@example.com",
                        "phone": "+15550100",
                    },
                    "pickup_address": "12 Warehouse Row, Brooklyn",
                    "delivery_address": "500 5th Ave, Manhattan",
                    "package_type": "electronics",
                    "priority": "express",
                }
            ]
        }
    }


class UpdateStatusRequest(BaseModel):
    status: str = Field(..., examples=["in_transit"])
    location: str | None = None


class OptimizeRouteRequest(BaseModel):
    order_ids: list[str] = Field(min_length=1, examples=[["ORD-1A2B3C4D", "ORD-5E6F7A8B"]])


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderCreatedResponse(BaseModel):
    order_id: str
    tracking_id: str
    customer_name: str
    status: str
    estimated_delivery: datetime
    pickup_address: str
    delivery_address: str
    package_type: str
    priority: str
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderCreatedResponse":
        return cls(
            order_id=order.order_id,
            tracking_id=order.tracking_id,
            customer_name=order.customer.name,
            status=order.status.value,
            estimated_delivery=order.estimated_delivery,
            pickup_address=order.pickup_address,
            delivery_address=order.delivery_address,
            package_type=order.package_type.value,
            priority=order.priority.value,
            created_at=order.created_at,
        )


class OrderResponse(BaseModel):
    order_id: str
    tracking_id: str
    status: str
    customer: CustomerSchema
    pickup_address: str
    delivery_address: str
    package_type: str
    priority: str
    special_instructions: str | None = None
    delay_reason: str | None = None
    timeline: list[TimelineEventSchema]
    created_at: datetime
    updated_at: datetime
    estimated_delivery: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            order_id=order.order_id,
            tracking_id=order.tracking_id,
            status=order.status.value,
            customer=CustomerSchema(**order.customer.model_dump()),
            pickup_address=order.pickup_address,
            delivery_address=order.delivery_address,
            package_type=order.package_type.value,
            priority=order.priority.value,
            special_instructions=order.special_instructions,
            delay_reason=order.delay_reason,
            timeline=[TimelineEventSchema(**event.model_dump()) for event in order.timeline],
            created_at=order.created_at,
            updated_at=order.updated_at,
            estimated_delivery=order.estimated_delivery,
        )


class OrderSummary(BaseModel):
    order_id: str
    customer_name: str
    status: str
    created_at: datetime
    delivery_address: str
    priority: str


class PaginationSchema(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class OrderListResponse(BaseModel):
    orders: list[OrderSummary]
    pagination: PaginationSchema


class StatusUpdatedResponse(BaseModel):
    order_id: str
    status: str
    location: str | None = None
    updated_at: datetime


class TrackingResponse(BaseModel):
    tracking_id: str
    order_id: str
    status: str
    current_location: LocationSchema
    estimated_delivery: datetime
    timeline: list[TimelineEventSchema]


class AnalyticsResponse(BaseModel):
    total_orders: int
    delivered_orders: int
    in_transit_orders: int
    pending_orders: int
    delayed_orders: int
    failed_orders: int


class RouteStopSchema(BaseModel):
    sequence_number: int
    order_id: str
    delivery_address: str
    estimated_minutes: int
    distance_miles: float


class RoutePlanResponse(BaseModel):
    stops: list[RouteStopSchema]
    total_distance_miles: float
    total_minutes: int
    fuel_cost: float
    efficiency_percent: int
