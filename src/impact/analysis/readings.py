"""Environmental signal readings: the fixed schema every signal source returns."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class WeatherCondition(Enum):
    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"
    FOG = "fog"


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WeatherReading(BaseModel):
    location: str
    condition: WeatherCondition
    temperature: float  # Fahrenheit
    precipitation_chance: int = 0
    wind_speed: int = 0
    visibility: int = 10
    impact_level: Severity
    recommendation: str = ""


class TrafficReading(BaseModel):
    waypoint: str
    congestion_level: Severity
    average_speed: int = 0
    incident_count: int = 0
    estimated_delay_minutes: int = 0
    alternative_routes_available: bool = False
    best_departure_time: datetime | None = None
