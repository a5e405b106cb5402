"""Delivery route planning for a batch of orders.

Stops are visited in the order given. Per-stop and total figures are a
flat estimate: each stop adds a fixed leg, with no geocoding involved.
"""

from pydantic import BaseModel

from shipping.order.order import Order

FIRST_STOP_MINUTES = 10
MINUTES_PER_STOP = 15
FIRST_STOP_MILES = 2.5
MILES_PER_STOP = 1.2

ROUTE_MILES_PER_ORDER = 3.2
ROUTE_MINUTES_PER_ORDER = 25
FUEL_COST_PER_MILE = 0.8
BASE_EFFICIENCY = 70
EFFICIENCY_PER_ORDER = 3
MAX_EFFICIENCY = 95


class RouteStop(BaseModel):
    sequence_number: int
    order_id: str
    delivery_address: str
    estimated_minutes: int
    distance_miles: float


class RoutePlan(BaseModel):
    stops: list[RouteStop]
    total_distance_miles: float
    total_minutes: int
    fuel_cost: float
    efficiency_percent: int


def plan_route(orders: list[Order]) -> RoutePlan:
    stops = [
        RouteStop(
            sequence_number=index + 1,
            order_id=order.order_id,
            delivery_address=order.delivery_address,
            estimated_minutes=FIRST_STOP_MINUTES + index * MINUTES_PER_STOP,
            distance_miles=round(FIRST_STOP_MILES + index * MILES_PER_STOP, 1),
        )
        for index, order in enumerate(orders)
    ]
    total_distance = round(len(orders) * ROUTE_MILES_PER_ORDER, 1)
    return RoutePlan(
        stops=stops,
        total_distance_miles=total_distance,
        total_minutes=len(orders) * ROUTE_MINUTES_PER_ORDER,
        fuel_cost=round(total_distance * FUEL_COST_PER_MILE, 2),
        efficiency_percent=min(MAX_EFFICIENCY, BASE_EFFICIENCY + len(orders) * EFFICIENCY_PER_ORDER),
    )
