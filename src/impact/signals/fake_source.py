"""Fake signal source: simulated weather and traffic for development and tests.

Conditions cycle through a fixed sequence by position; the remaining
fields come from a seeded generator, so the same seed yields the same
batch. Tests can script exact batches with ``script_weather`` and
``script_traffic``.
"""

import random
from datetime import UTC, datetime, timedelta

from impact.analysis.readings import Severity, TrafficReading, WeatherCondition, WeatherReading
from impact.analysis.weather import recommend_for_condition
from impact.signals.port import SignalSource
from shared.errors import CollaboratorUnavailable

_CONDITIONS = list(WeatherCondition)
_SEVERITIES = list(Severity)


class FakeSignalSource(SignalSource):
    def __init__(self, seed: int = 0):
        self._random = random.Random(seed)
        self.should_succeed = True
        self.failure_reason = "Signal source unavailable"
        self._weather_script: dict[str, WeatherReading] = {}
        self._traffic_script: dict[str, TrafficReading] = {}

    def configure(self, should_succeed: bool = True, failure_reason: str = "Signal source unavailable"):
        """Configure the fake source behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def script_weather(self, readings: list[WeatherReading]) -> None:
        """Return these readings for their locations instead of simulated ones."""
        self._weather_script.update({r.location: r for r in readings})

    def script_traffic(self, readings: list[TrafficReading]) -> None:
        """Return these readings for their waypoints instead of simulated ones."""
        self._traffic_script.update({r.waypoint: r for r in readings})

    def _check_available(self) -> None:
        if not self.should_succeed:
            raise CollaboratorUnavailable("signal source", self.failure_reason)

    def fetch_weather(self, locations: list[str], timeout: float) -> list[WeatherReading]:
        self._check_available()
        return [
            self._weather_script.get(location) or self._simulate_weather(index, location)
            for index, location in enumerate(locations)
        ]

    def fetch_traffic(self, waypoints: list[str], timeout: float) -> list[TrafficReading]:
        self._check_available()
        base = datetime.now(UTC).replace(hour=9, minute=0, second=0, microsecond=0)
        return [
            self._traffic_script.get(waypoint) or self._simulate_traffic(index, waypoint, base)
            for index, waypoint in enumerate(waypoints)
        ]

    def _simulate_weather(self, index: int, location: str) -> WeatherReading:
        condition = _CONDITIONS[index % len(_CONDITIONS)]
        return WeatherReading(
            location=location,
            condition=condition,
            temperature=self._random.randint(20, 59),
            precipitation_chance=self._random.randint(0, 99),
            wind_speed=self._random.randint(0, 19),
            visibility=self._random.randint(1, 10),
            impact_level=self._random.choice(_SEVERITIES),
            recommendation=recommend_for_condition(condition),
        )

    def _simulate_traffic(self, index: int, waypoint: str, base: datetime) -> TrafficReading:
        return TrafficReading(
            waypoint=waypoint,
            congestion_level=self._random.choice(_SEVERITIES),
            average_speed=self._random.randint(15, 54),
            incident_count=self._random.randint(0, 2),
            estimated_delay_minutes=self._random.randint(0, 44),
            alternative_routes_available=self._random.random() > 0.5,
            # Stagger suggested departures two hours apart
            best_departure_time=base + timedelta(hours=2 * index),
        )

    def reset(self):
        self._weather_script.clear()
        self._traffic_script.clear()
        self.should_succeed = True
        self.failure_reason = "Signal source unavailable"
