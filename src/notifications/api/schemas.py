"""Pydantic request/response models for the Notifications API."""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class SendNotificationRequest(BaseModel):
    order_id: str = Field(..., min_length=1)
    customer_id: str = Field(..., min_length=1)
    notification_type: str = Field(
        ...,
        examples=["delivery_delayed"],
        description="NotificationType value; unknown types use the generic status update template",
    )
    message_data: dict[str, str] = Field(default_factory=dict)


class RegisterContactRequest(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class ChannelAttemptResponse(BaseModel):
    channel: str
    message_id: str | None = None
    error: str | None = None


class NotificationResultResponse(BaseModel):
    notification_id: str
    order_id: str
    customer_id: str
    notification_type: str
    status: str
    subject: str
    sent: list[ChannelAttemptResponse]
    failed: list[ChannelAttemptResponse]
    error: str | None = None


class NotificationLogEntryResponse(BaseModel):
    notification_id: str
    customer_id: str
    notification_type: str
    status: str
    channels: list[str]
    error_message: str | None = None
    timestamp: datetime


class NotificationLogResponse(BaseModel):
    order_id: str
    entries: list[NotificationLogEntryResponse]
