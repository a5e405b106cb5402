"""HTTP signal source: fetches readings from a signal gateway over HTTP.

The gateway answers ``GET /weather?location=...`` and
``GET /traffic?waypoint=...`` with a JSON list in the reading schema.
"""

import httpx
import pydantic
import structlog

from impact.analysis.readings import TrafficReading, WeatherReading
from impact.signals.port import SignalSource
from shared.errors import CollaboratorUnavailable

logger = structlog.get_logger(__name__)


class HttpSignalSource(SignalSource):
    def __init__(self, base_url: str, transport: httpx.BaseTransport | None = None):
        self.base_url = base_url
        self._transport = transport

    def _get(self, path: str, params: list[tuple[str, str]], timeout: float) -> list[dict]:
        try:
            with httpx.Client(base_url=self.base_url, timeout=timeout, transport=self._transport) as client:
                response = client.get(path, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as exc:
            logger.warning("Signal request timed out", path=path, timeout=timeout)
            raise CollaboratorUnavailable("signal source", f"timed out after {timeout}s") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Signal request failed", path=path, error=str(exc))
            raise CollaboratorUnavailable("signal source", str(exc)) from exc

        if not isinstance(payload, list):
            logger.warning("Signal response is not a list", path=path, payload_type=type(payload).__name__)
            raise CollaboratorUnavailable("signal source", f"malformed {path.lstrip('/')} response")
        return payload

    def fetch_weather(self, locations: list[str], timeout: float) -> list[WeatherReading]:
        payload = self._get("/weather", [("location", location) for location in locations], timeout)
        try:
            return [WeatherReading.model_validate(item) for item in payload]
        except pydantic.ValidationError as exc:
            raise CollaboratorUnavailable("signal source", "malformed weather response") from exc

    def fetch_traffic(self, waypoints: list[str], timeout: float) -> list[TrafficReading]:
        payload = self._get("/traffic", [("waypoint", waypoint) for waypoint in waypoints], timeout)
        try:
            return [TrafficReading.model_validate(item) for item in payload]
        except pydantic.ValidationError as exc:
            raise CollaboratorUnavailable("signal source", "malformed traffic response") from exc
