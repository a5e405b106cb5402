"""Notification types and dispatch results.

A notification request is rendered once and sent over every channel the
customer has registered. Each channel attempt is recorded independently;
the request as a whole is summarized by a single log entry.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationType(Enum):
    ORDER_CREATED = "order_created"
    ORDER_PICKED_UP = "order_picked_up"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    DELIVERY_DELAYED = "delivery_delayed"
    DELIVERY_FAILED = "delivery_failed"


class NotificationChannel(Enum):
    SMS = "SMS"
    EMAIL = "Email"


class DispatchStatus(Enum):
    SENT = "sent"
    PARTIAL = "partial"
    FAILED = "failed"


def parse_notification_type(notification_type: NotificationType | str) -> NotificationType | None:
    """Return the matching NotificationType, or None for an unknown type string."""
    if isinstance(notification_type, NotificationType):
        return notification_type
    try:
        return NotificationType(notification_type)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
class CustomerContact(BaseModel):
    customer_id: str
    name: str | None = None
    phone: str | None = None
    email: str | None = None


class ChannelAttempt(BaseModel):
    channel: NotificationChannel
    address: str
    message_id: str | None = None
    error: str | None = None


class NotificationResult(BaseModel):
    log_entry_id: str
    order_id: str
    customer_id: str
    notification_type: str
    subject: str
    body: str
    sent: list[ChannelAttempt] = Field(default_factory=list)
    failed: list[ChannelAttempt] = Field(default_factory=list)
    error: str | None = None

    @property
    def status(self) -> DispatchStatus:
        if self.sent and not self.failed:
            return DispatchStatus.SENT
        if self.sent:
            return DispatchStatus.PARTIAL
        return DispatchStatus.FAILED


class NotificationLogEntry(BaseModel):
    notification_id: str
    order_id: str
    customer_id: str
    notification_type: str
    status: DispatchStatus
    channels: list[str] = Field(default_factory=list)
    error_message: str | None = None
    timestamp: datetime
