"""Impact analysis entry points: fetch signals, analyze, and optionally act.

Signals are fetched before any order is touched. A signal source that is
unavailable or times out yields a ``Degraded`` outcome instead of a verdict;
it never raises past this boundary.
"""

from datetime import datetime, timedelta

import structlog
from pydantic import BaseModel

from impact.actions.dispatcher import ActionDispatcher, ActionReport
from impact.analysis.readings import TrafficReading, WeatherReading
from impact.analysis.traffic import TrafficVerdict, analyze_traffic
from impact.analysis.weather import WeatherVerdict, analyze_weather
from impact.signals import get_signal_source
from notifications.domain import get_notification_dispatcher
from shared.config import get_settings
from shared.errors import CollaboratorUnavailable
from shipping.domain import get_order_store

logger = structlog.get_logger(__name__)

WEATHER_DELAY_REASON = "weather_delay"
TRAFFIC_DELAY_REASON = "traffic_delay"


class Degraded(BaseModel):
    pipeline: str
    reason: str


class WeatherImpactOutcome(BaseModel):
    readings: list[WeatherReading] = []
    verdict: WeatherVerdict | None = None
    degraded: Degraded | None = None
    actions: ActionReport | None = None


class TrafficImpactOutcome(BaseModel):
    readings: list[TrafficReading] = []
    verdict: TrafficVerdict | None = None
    degraded: Degraded | None = None
    actions: ActionReport | None = None


def _action_dispatcher() -> ActionDispatcher:
    return ActionDispatcher(get_order_store(), get_notification_dispatcher())


def analyze_weather_impact(
    locations: list[str],
    package_sensitivity: str | None = None,
    act: bool = True,
    now: datetime | None = None,
) -> WeatherImpactOutcome:
    """Analyze weather along delivery locations; delay affected orders when ``act``."""
    settings = get_settings()
    try:
        readings = get_signal_source().fetch_weather(locations, timeout=settings.SIGNAL_TIMEOUT_SECONDS)
    except (CollaboratorUnavailable, TimeoutError) as exc:
        logger.warning("Weather analysis degraded", locations=locations, reason=str(exc))
        return WeatherImpactOutcome(degraded=Degraded(pipeline="weather", reason=str(exc)))

    verdict = analyze_weather(readings, package_sensitivity)
    logger.info(
        "Weather impact analyzed",
        locations=len(locations),
        has_high_impact=verdict.has_high_impact,
        overall_risk=verdict.overall_risk.value,
    )

    actions = None
    if act:
        actions = _action_dispatcher().dispatch(
            verdict,
            WEATHER_DELAY_REASON,
            delay=timedelta(hours=verdict.estimated_delay_hours),
            now=now,
        )
    return WeatherImpactOutcome(readings=readings, verdict=verdict, actions=actions)


def analyze_traffic_impact(
    waypoints: list[str],
    departure_time: datetime | None = None,
    vehicle_type: str | None = None,
    act: bool = True,
    now: datetime | None = None,
) -> TrafficImpactOutcome:
    """Analyze traffic along route waypoints; delay orders at congested waypoints when ``act``."""
    settings = get_settings()
    try:
        readings = get_signal_source().fetch_traffic(waypoints, timeout=settings.SIGNAL_TIMEOUT_SECONDS)
    except (CollaboratorUnavailable, TimeoutError) as exc:
        logger.warning("Traffic analysis degraded", waypoints=waypoints, reason=str(exc))
        return TrafficImpactOutcome(degraded=Degraded(pipeline="traffic", reason=str(exc)))

    verdict = analyze_traffic(
        readings,
        departure_time=departure_time,
        vehicle_type=vehicle_type,
        delay_threshold=settings.TRAFFIC_DELAY_THRESHOLD_MINUTES,
    )
    logger.info(
        "Traffic impact analyzed",
        waypoints=len(waypoints),
        requires_optimization=verdict.requires_optimization,
        total_delay_minutes=verdict.total_delay_minutes,
        optimized_route=verdict.optimized_route,
    )

    actions = None
    if act:
        actions = _action_dispatcher().dispatch(
            verdict,
            TRAFFIC_DELAY_REASON,
            delay=timedelta(minutes=verdict.total_delay_minutes),
            now=now,
        )
    return TrafficImpactOutcome(readings=readings, verdict=verdict, actions=actions)
