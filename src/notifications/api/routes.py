"""FastAPI routes for the Notifications domain.

Thin adapters that translate HTTP requests into dispatcher calls.
"""

from fastapi import APIRouter

from notifications.api.schemas import (
    ChannelAttemptResponse,
    NotificationLogEntryResponse,
    NotificationLogResponse,
    NotificationResultResponse,
    RegisterContactRequest,
    SendNotificationRequest,
    StatusResponse,
)
from notifications.domain import dispatch_notification, register_customer_contact
from notifications.log import get_notification_log
from notifications.notification.notification import ChannelAttempt, CustomerContact

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def _attempt(attempt: ChannelAttempt) -> ChannelAttemptResponse:
    return ChannelAttemptResponse(
        channel=attempt.channel.value,
        message_id=attempt.message_id,
        error=attempt.error,
    )


@router.post("", response_model=NotificationResultResponse)
async def send_notification(body: SendNotificationRequest) -> NotificationResultResponse:
    """Send a notification to a customer over every registered channel."""
    result = dispatch_notification(
        body.order_id,
        body.customer_id,
        body.notification_type,
        body.message_data,
    )
    return NotificationResultResponse(
        notification_id=result.log_entry_id,
        order_id=result.order_id,
        customer_id=result.customer_id,
        notification_type=result.notification_type,
        status=result.status.value,
        subject=result.subject,
        sent=[_attempt(a) for a in result.sent],
        failed=[_attempt(a) for a in result.failed],
        error=result.error,
    )


@router.put("/contacts/{customer_id}", response_model=StatusResponse)
async def register_contact(customer_id: str, body: RegisterContactRequest) -> StatusResponse:
    """Register or replace a customer's contact channels."""
    register_customer_contact(CustomerContact(customer_id=customer_id, **body.model_dump()))
    return StatusResponse()


@router.get("/orders/{order_id}", response_model=NotificationLogResponse)
async def get_order_notifications(order_id: str) -> NotificationLogResponse:
    """Notification history for an order, oldest first."""
    entries = get_notification_log().entries_for(order_id)
    return NotificationLogResponse(
        order_id=order_id,
        entries=[
            NotificationLogEntryResponse(
                notification_id=e.notification_id,
                customer_id=e.customer_id,
                notification_type=e.notification_type,
                status=e.status.value,
                channels=e.channels,
                error_message=e.error_message,
                timestamp=e.timestamp,
            )
            for e in entries
        ],
    )
