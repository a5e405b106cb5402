"""FastAPI routes for the Shipping domain.

Thin adapters that translate HTTP requests into lifecycle operations.
"""

from fastapi import APIRouter, Query

from notifications.domain import register_customer_contact
from notifications.notification.notification import CustomerContact
from shipping.api.schemas import (
    AnalyticsResponse,
    CreateOrderRequest,
    LocationSchema,
    OptimizeRouteRequest,
    OrderCreatedResponse,
    OrderListResponse,
    OrderResponse,
    OrderSummary,
    PaginationSchema,
    RoutePlanResponse,
    RouteStopSchema,
    StatusUpdatedResponse,
    TimelineEventSchema,
    TrackingResponse,
    UpdateStatusRequest,
)
from shipping.order.lifecycle import (
    create_order,
    get_order,
    get_tracking_by_tracking_id,
    list_orders,
    order_analytics,
    plan_delivery_route,
    update_order_status,
)
from shipping.order.order import OrderPayload

router = APIRouter(prefix="/api", tags=["shipping"])


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@router.post("/orders", status_code=201, response_model=OrderCreatedResponse)
async def create(body: CreateOrderRequest) -> OrderCreatedResponse:
    """Place a new order and start tracking it."""
    order = create_order(OrderPayload.model_validate(body.model_dump()))
    register_customer_contact(
        CustomerContact(
            customer_id=body.customer.customer_id,
            name=body.customer.name,
            phone=body.customer.phone,
            email=body.customer.email,
        )
    )
    return OrderCreatedResponse.from_order(order)


@router.get("/orders", response_model=OrderListResponse)
async def list_all(
    status: str | None = None,
    page: int = Query(1),
    limit: int = Query(10),
) -> OrderListResponse:
    """List orders oldest first, optionally filtered by status."""
    result = list_orders(status=status, page=page, limit=limit)
    return OrderListResponse(
        orders=[
            OrderSummary(
                order_id=order.order_id,
                customer_name=order.customer.name,
                status=order.status.value,
                created_at=order.created_at,
                delivery_address=order.delivery_address,
                priority=order.priority.value,
            )
            for order in result.items
        ],
        pagination=PaginationSchema(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_one(order_id: str) -> OrderResponse:
    return OrderResponse.from_order(get_order(order_id))


@router.patch("/orders/{order_id}/status", response_model=StatusUpdatedResponse)
async def update_status(order_id: str, body: UpdateStatusRequest) -> StatusUpdatedResponse:
    """Record a status change reported by the carrier."""
    order = update_order_status(order_id, body.status, location=body.location)
    return StatusUpdatedResponse(
        order_id=order.order_id,
        status=order.status.value,
        location=body.location,
        updated_at=order.updated_at,
    )


# ---------------------------------------------------------------------------
# Tracking
# ---------------------------------------------------------------------------
@router.get("/tracking/{tracking_id}", response_model=TrackingResponse)
async def track(tracking_id: str) -> TrackingResponse:
    """Customer-facing tracking view, projected at request time."""
    projection = get_tracking_by_tracking_id(tracking_id)
    return TrackingResponse(
        tracking_id=projection.tracking_id,
        order_id=projection.order_id,
        status=projection.status.value,
        current_location=LocationSchema(**projection.current_location.model_dump()),
        estimated_delivery=projection.estimated_delivery,
        timeline=[TimelineEventSchema(**event.model_dump()) for event in projection.timeline],
    )


# ---------------------------------------------------------------------------
# Route planning
# ---------------------------------------------------------------------------
@router.post("/optimize-route", response_model=RoutePlanResponse)
async def optimize(body: OptimizeRouteRequest) -> RoutePlanResponse:
    """Sequence orders into a delivery route with per-stop estimates."""
    plan = plan_delivery_route(body.order_ids)
    return RoutePlanResponse(
        stops=[RouteStopSchema(**stop.model_dump()) for stop in plan.stops],
        total_distance_miles=plan.total_distance_miles,
        total_minutes=plan.total_minutes,
        fuel_cost=plan.fuel_cost,
        efficiency_percent=plan.efficiency_percent,
    )


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------
@router.get("/analytics", response_model=AnalyticsResponse)
async def analytics() -> AnalyticsResponse:
    return AnalyticsResponse(**order_analytics())
