"""Traffic impact analysis.

A route needs optimization when the summed waypoint delay exceeds the
threshold or more than one waypoint is heavily congested. The optimized
route visits waypoints from least to most congested; waypoints of equal
congestion keep their original relative order.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from impact.analysis.readings import Severity, TrafficReading

PIPELINE = "traffic"
DELAY_THRESHOLD_MINUTES = 30

_CONGESTION_RANK = {
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
}

TRAFFIC_RECOMMENDATIONS = [
    "Consider alternative routes",
    "Adjust departure times",
    "Group nearby deliveries",
    "Use real-time navigation updates",
]


class WaypointDelay(BaseModel):
    location: str
    delay_minutes: int
    severity: Severity


class TrafficVerdict(BaseModel):
    pipeline: str = PIPELINE
    requires_optimization: bool
    total_delay_minutes: int
    delays: list[WaypointDelay] = Field(default_factory=list)
    optimized_route: list[str] | None = None
    affected_locations: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    departure_time: datetime | None = None
    vehicle_type: str | None = None

    @property
    def requires_action(self) -> bool:
        return self.requires_optimization


def optimize_route(readings: list[TrafficReading]) -> list[str]:
    # sorted() is stable, so ties keep their input order
    return [r.waypoint for r in sorted(readings, key=lambda r: _CONGESTION_RANK[r.congestion_level])]


def analyze_traffic(
    readings: list[TrafficReading],
    departure_time: datetime | None = None,
    vehicle_type: str | None = None,
    delay_threshold: int = DELAY_THRESHOLD_MINUTES,
) -> TrafficVerdict:
    total_delay = sum(r.estimated_delay_minutes for r in readings)
    congested = [r.waypoint for r in readings if r.congestion_level == Severity.HIGH]
    requires_optimization = total_delay > delay_threshold or len(congested) > 1

    return TrafficVerdict(
        requires_optimization=requires_optimization,
        total_delay_minutes=total_delay,
        delays=[
            WaypointDelay(
                location=r.waypoint,
                delay_minutes=r.estimated_delay_minutes,
                severity=r.congestion_level,
            )
            for r in readings
        ],
        optimized_route=optimize_route(readings) if requires_optimization else None,
        affected_locations=congested,
        recommendations=list(TRAFFIC_RECOMMENDATIONS),
        departure_time=departure_time,
        vehicle_type=vehicle_type,
    )
