"""Signal source port: abstract interface for weather and traffic data providers.

Adapters must bound every call by ``timeout`` and raise
``CollaboratorUnavailable`` when the provider cannot answer in time.
"""

from abc import ABC, abstractmethod

from impact.analysis.readings import TrafficReading, WeatherReading


class SignalSource(ABC):
    """Abstract interface for environmental signal adapters."""

    @abstractmethod
    def fetch_weather(self, locations: list[str], timeout: float) -> list[WeatherReading]:
        """Return one weather reading per location."""
        ...

    @abstractmethod
    def fetch_traffic(self, waypoints: list[str], timeout: float) -> list[TrafficReading]:
        """Return one traffic reading per waypoint, in waypoint order."""
        ...
