"""Pydantic request/response schemas for the Impact API."""

from datetime import datetime

from pydantic import BaseModel, Field

from impact.actions.dispatcher import ActionReport
from impact.analysis.traffic import TrafficVerdict
from impact.analysis.weather import WeatherVerdict


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class WeatherImpactRequest(BaseModel):
    locations: list[str] = Field(..., min_length=1, examples=[["Manhattan", "Brooklyn"]])
    package_sensitivity: str | None = Field(None, examples=["electronics"])
    act: bool = True


class TrafficImpactRequest(BaseModel):
    waypoints: list[str] = Field(..., min_length=1, examples=[["Queens", "Bronx", "Harlem"]])
    departure_time: datetime | None = None
    vehicle_type: str | None = Field(None, examples=["van"])
    act: bool = True


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class FailedActionSchema(BaseModel):
    target: str
    error: str


class ActionSummary(BaseModel):
    updated_orders: list[str]
    failed: list[FailedActionSchema]
    notifications_sent: int
    notification_failures: list[FailedActionSchema]
    partial_failure: bool

    @classmethod
    def from_report(cls, report: ActionReport) -> "ActionSummary":
        return cls(
            updated_orders=report.updated,
            failed=[FailedActionSchema(**f.model_dump()) for f in report.failed],
            notifications_sent=sum(1 for n in report.notifications if n.sent),
            notification_failures=[FailedActionSchema(**f.model_dump()) for f in report.notification_failures],
            partial_failure=report.is_partial_failure,
        )


class DegradedSchema(BaseModel):
    pipeline: str
    reason: str


class WeatherImpactResponse(BaseModel):
    weather_analysis: WeatherVerdict | None = None
    degraded: DegradedSchema | None = None
    actions: ActionSummary | None = None
    autonomous_actions_taken: list[str] = Field(default_factory=list)


class TrafficImpactResponse(BaseModel):
    traffic_analysis: TrafficVerdict | None = None
    degraded: DegradedSchema | None = None
    actions: ActionSummary | None = None
    autonomous_actions_taken: list[str] = Field(default_factory=list)
