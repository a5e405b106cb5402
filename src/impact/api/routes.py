"""FastAPI routes for the Impact domain.

Each request fetches fresh signals, analyzes them and, unless ``act`` is
false, lets the action dispatcher delay affected orders. The handlers are
synchronous so signal fetches run in the worker threadpool.
"""

from fastapi import APIRouter

from impact.api.schemas import (
    ActionSummary,
    DegradedSchema,
    TrafficImpactRequest,
    TrafficImpactResponse,
    WeatherImpactRequest,
    WeatherImpactResponse,
)
from impact.service import analyze_traffic_impact, analyze_weather_impact

router = APIRouter(prefix="/api/impact", tags=["impact"])


@router.post("/weather", response_model=WeatherImpactResponse)
def weather_impact(body: WeatherImpactRequest) -> WeatherImpactResponse:
    """Analyze weather along delivery locations."""
    outcome = analyze_weather_impact(body.locations, body.package_sensitivity, act=body.act)
    if outcome.degraded:
        return WeatherImpactResponse(degraded=DegradedSchema(**outcome.degraded.model_dump()))
    return WeatherImpactResponse(
        weather_analysis=outcome.verdict,
        actions=ActionSummary.from_report(outcome.actions) if outcome.actions else None,
        autonomous_actions_taken=outcome.actions.actions_taken if outcome.actions else [],
    )


@router.post("/traffic", response_model=TrafficImpactResponse)
def traffic_impact(body: TrafficImpactRequest) -> TrafficImpactResponse:
    """Analyze traffic along a delivery route."""
    outcome = analyze_traffic_impact(
        body.waypoints,
        departure_time=body.departure_time,
        vehicle_type=body.vehicle_type,
        act=body.act,
    )
    if outcome.degraded:
        return TrafficImpactResponse(degraded=DegradedSchema(**outcome.degraded.model_dump()))
    return TrafficImpactResponse(
        traffic_analysis=outcome.verdict,
        actions=ActionSummary.from_report(outcome.actions) if outcome.actions else None,
        autonomous_actions_taken=outcome.actions.actions_taken if outcome.actions else [],
    )
