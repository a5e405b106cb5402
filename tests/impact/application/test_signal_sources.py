"""Tests for the fake and HTTP signal sources and the source registry."""

import httpx
import pytest
from impact.analysis.readings import Severity, WeatherCondition
from impact.signals import get_signal_source, reset_signal_source
from impact.signals.fake_source import FakeSignalSource
from impact.signals.http_source import HttpSignalSource
from shared.config import reset_settings
from shared.errors import CollaboratorUnavailable
from tests.support.factories import traffic_reading, weather_reading


class TestFakeSignalSource:
    def setup_method(self):
        self.source = FakeSignalSource(seed=7)

    def test_one_reading_per_location_in_order(self):
        readings = self.source.fetch_weather(["A", "B", "C"], timeout=1)
        assert [r.location for r in readings] == ["A", "B", "C"]

    def test_conditions_cycle_by_position(self):
        readings = self.source.fetch_weather(["A", "B", "C", "D", "E", "F"], timeout=1)
        assert [r.condition for r in readings] == [
            WeatherCondition.CLEAR,
            WeatherCondition.RAIN,
            WeatherCondition.SNOW,
            WeatherCondition.STORM,
            WeatherCondition.FOG,
            WeatherCondition.CLEAR,
        ]
        assert readings[1].recommendation == "Use waterproof packaging, allow extra time"

    def test_same_seed_same_batch(self):
        first = FakeSignalSource(seed=3).fetch_weather(["A", "B"], timeout=1)
        second = FakeSignalSource(seed=3).fetch_weather(["A", "B"], timeout=1)
        assert first == second

    def test_traffic_departures_two_hours_apart(self):
        readings = self.source.fetch_traffic(["A", "B", "C"], timeout=1)
        assert [r.waypoint for r in readings] == ["A", "B", "C"]
        gaps = [(b.best_departure_time - a.best_departure_time).total_seconds() for a, b in zip(readings, readings[1:])]
        assert gaps == [7200, 7200]
        assert readings[0].best_departure_time.hour == 9

    def test_scripted_readings_win(self):
        self.source.script_weather([weather_reading("B", impact_level=Severity.HIGH)])
        self.source.script_traffic([traffic_reading("X", estimated_delay_minutes=99)])
        weather = self.source.fetch_weather(["A", "B"], timeout=1)
        traffic = self.source.fetch_traffic(["X"], timeout=1)
        assert weather[1].impact_level == Severity.HIGH
        assert traffic[0].estimated_delay_minutes == 99

    def test_unavailable(self):
        self.source.configure(should_succeed=False, failure_reason="feed down")
        with pytest.raises(CollaboratorUnavailable, match="feed down"):
            self.source.fetch_weather(["A"], timeout=1)
        with pytest.raises(CollaboratorUnavailable):
            self.source.fetch_traffic(["A"], timeout=1)

    def test_reset(self):
        self.source.script_weather([weather_reading("A", impact_level=Severity.HIGH)])
        self.source.configure(should_succeed=False)
        self.source.reset()
        assert self.source.should_succeed is True
        assert self.source.fetch_weather(["A"], timeout=1)[0].condition == WeatherCondition.CLEAR


def _weather_json(location, **overrides):
    data = {
        "location": location,
        "condition": "rain",
        "temperature": 50,
        "impact_level": "medium",
    }
    data.update(overrides)
    return data


class TestHttpSignalSource:
    def test_fetch_weather(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["locations"] = request.url.params.get_list("location")
            return httpx.Response(200, json=[_weather_json(loc) for loc in seen["locations"]])

        source = HttpSignalSource("http://signals.test", transport=httpx.MockTransport(handler))
        readings = source.fetch_weather(["Manhattan", "Queens"], timeout=2)

        assert seen == {"path": "/weather", "locations": ["Manhattan", "Queens"]}
        assert [r.location for r in readings] == ["Manhattan", "Queens"]
        assert readings[0].condition == WeatherCondition.RAIN

    def test_fetch_traffic(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json=[
                    {"waypoint": wp, "congestion_level": "high", "estimated_delay_minutes": 20}
                    for wp in request.url.params.get_list("waypoint")
                ],
            )

        source = HttpSignalSource("http://signals.test", transport=httpx.MockTransport(handler))
        readings = source.fetch_traffic(["A", "B"], timeout=2)
        assert [r.estimated_delay_minutes for r in readings] == [20, 20]
        assert readings[0].congestion_level == Severity.HIGH

    def test_server_error_is_unavailable(self):
        source = HttpSignalSource(
            "http://signals.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(502)),
        )
        with pytest.raises(CollaboratorUnavailable):
            source.fetch_weather(["A"], timeout=2)

    def test_non_list_json_is_unavailable(self):
        source = HttpSignalSource(
            "http://signals.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"null")),
        )
        with pytest.raises(CollaboratorUnavailable, match="malformed weather response"):
            source.fetch_weather(["A"], timeout=2)

    def test_json_object_is_unavailable(self):
        source = HttpSignalSource(
            "http://signals.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"waypoint": "A"})),
        )
        with pytest.raises(CollaboratorUnavailable, match="malformed traffic response"):
            source.fetch_traffic(["A"], timeout=2)

    def test_timeout_is_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        source = HttpSignalSource("http://signals.test", transport=httpx.MockTransport(handler))
        with pytest.raises(CollaboratorUnavailable, match="timed out"):
            source.fetch_traffic(["A"], timeout=0.5)

    def test_malformed_payload_is_unavailable(self):
        source = HttpSignalSource(
            "http://signals.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[{"location": "A"}])),
        )
        with pytest.raises(CollaboratorUnavailable, match="malformed"):
            source.fetch_weather(["A"], timeout=2)

    def test_non_json_body_is_unavailable(self):
        source = HttpSignalSource(
            "http://signals.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")),
        )
        with pytest.raises(CollaboratorUnavailable):
            source.fetch_weather(["A"], timeout=2)


class TestSignalSourceRegistry:
    def test_fake_by_default(self):
        assert isinstance(get_signal_source(), FakeSignalSource)

    def test_http_from_settings(self, monkeypatch):
        monkeypatch.setenv("SIGNAL_SOURCE", "http")
        monkeypatch.setenv("SIGNAL_API_URL", "http://gateway.internal")
        reset_settings()
        reset_signal_source()
        source = get_signal_source()
        assert isinstance(source, HttpSignalSource)
        assert source.base_url == "http://gateway.internal"

    def test_unknown_source(self, monkeypatch):
        monkeypatch.setenv("SIGNAL_SOURCE", "carrier-pigeon")
        reset_settings()
        reset_signal_source()
        with pytest.raises(ValueError, match="Unknown signal source"):
            get_signal_source()
