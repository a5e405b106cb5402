"""Weather impact analysis.

A reading is high impact when its classified impact level is high, when it
rains on an electronics shipment, or when it snows below freezing. The
overall risk is high once more than half of the batch is high impact.
"""

from pydantic import BaseModel, Field

from impact.analysis.readings import Severity, WeatherCondition, WeatherReading

PIPELINE = "weather"
FREEZING_POINT_F = 32
ELECTRONICS = "electronics"
DELAY_HOURS_PER_IMPACT = 2

WEATHER_RECOMMENDATIONS = [
    "Reschedule non-urgent deliveries",
    "Use weather-appropriate packaging",
    "Notify customers of potential delays",
    "Deploy vehicles with appropriate equipment",
]

_CONDITION_ADVICE = {
    WeatherCondition.CLEAR: "Optimal delivery conditions",
    WeatherCondition.RAIN: "Use waterproof packaging, allow extra time",
    WeatherCondition.SNOW: "Consider delays, use appropriate vehicles",
    WeatherCondition.STORM: "Delay non-urgent deliveries",
    WeatherCondition.FOG: "Reduce speed, use GPS navigation",
}


def recommend_for_condition(condition: WeatherCondition | str) -> str:
    """Per-condition delivery advice."""
    try:
        return _CONDITION_ADVICE[WeatherCondition(condition)]
    except ValueError:
        return "Monitor conditions closely"


class WeatherVerdict(BaseModel):
    pipeline: str = PIPELINE
    has_high_impact: bool
    affected_locations: list[str] = Field(default_factory=list)
    overall_risk: Severity
    recommendations: list[str] = Field(default_factory=list)
    estimated_delay_hours: int = 0

    @property
    def requires_action(self) -> bool:
        return self.has_high_impact


def is_high_impact(reading: WeatherReading, package_sensitivity: str | None = None) -> bool:
    return (
        reading.impact_level == Severity.HIGH
        or (reading.condition == WeatherCondition.RAIN and package_sensitivity == ELECTRONICS)
        or (reading.condition == WeatherCondition.SNOW and reading.temperature < FREEZING_POINT_F)
    )


def analyze_weather(readings: list[WeatherReading], package_sensitivity: str | None = None) -> WeatherVerdict:
    high_impact = [r for r in readings if is_high_impact(r, package_sensitivity)]

    return WeatherVerdict(
        has_high_impact=bool(high_impact),
        affected_locations=[r.location for r in high_impact],
        overall_risk=Severity.HIGH if len(high_impact) > len(readings) / 2 else Severity.MEDIUM,
        recommendations=list(WEATHER_RECOMMENDATIONS) if high_impact else [],
        estimated_delay_hours=len(high_impact) * DELAY_HOURS_PER_IMPACT,
    )
