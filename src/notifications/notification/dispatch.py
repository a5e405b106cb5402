"""Notification dispatcher: renders a message and sends it over every registered channel.

Phone numbers go to the SMS channel and email addresses to the email channel.
Channel attempts are independent: one failing never blocks the other. Each
call to ``notify`` writes exactly one log entry, and a failing log write is
never raised back to the caller.
"""

from datetime import UTC, datetime
from uuid import uuid4

import structlog

from notifications.channel import get_channel
from notifications.channel.port import SendReceipt
from notifications.directory.port import CustomerDirectory
from notifications.log.port import NotificationLogPort
from notifications.notification.notification import (
    ChannelAttempt,
    NotificationChannel,
    NotificationLogEntry,
    NotificationResult,
    NotificationType,
)
from notifications.templates import render
from shared.errors import CollaboratorUnavailable, CustomerNotFound

logger = structlog.get_logger(__name__)


def _type_label(notification_type: NotificationType | str) -> str:
    if isinstance(notification_type, NotificationType):
        return notification_type.value
    return str(notification_type)


class NotificationDispatcher:
    def __init__(
        self,
        directory: CustomerDirectory,
        notification_log: NotificationLogPort,
        channel_resolver=get_channel,
    ):
        self._directory = directory
        self._log = notification_log
        self._channel_resolver = channel_resolver

    def notify(
        self,
        order_id: str,
        customer_id: str,
        notification_type: NotificationType | str,
        template_data: dict | None = None,
        now: datetime | None = None,
    ) -> NotificationResult:
        """Send one notification to a customer.

        Raises:
            CustomerNotFound: the directory has no such customer. The attempt
                is logged as failed and not retried.
        """
        now = now or datetime.now(UTC)
        type_label = _type_label(notification_type)
        log_entry_id = f"{order_id}-{uuid4().hex[:12]}"
        rendered = render(notification_type, order_id, template_data)

        result = NotificationResult(
            log_entry_id=log_entry_id,
            order_id=order_id,
            customer_id=customer_id,
            notification_type=type_label,
            subject=rendered["subject"],
            body=rendered["body"],
        )

        try:
            contact = self._directory.get_contact(customer_id)
        except CollaboratorUnavailable as exc:
            result.error = str(exc)
            self._record(result, now)
            logger.warning("Customer directory unavailable", order_id=order_id, customer_id=customer_id)
            return result

        if contact is None:
            result.error = f"Customer not found: {customer_id}"
            self._record(result, now)
            logger.error("Notification failed", order_id=order_id, error=result.error)
            raise CustomerNotFound(customer_id)

        if contact.phone:
            self._send(result, NotificationChannel.SMS, contact.phone)
        if contact.email:
            self._send(result, NotificationChannel.EMAIL, contact.email)

        if not contact.phone and not contact.email:
            result.error = "No contact channels registered"
        elif result.failed:
            result.error = "; ".join(attempt.error or "unknown error" for attempt in result.failed)

        self._record(result, now)
        logger.info(
            "Notification dispatched",
            order_id=order_id,
            customer_id=customer_id,
            notification_type=type_label,
            status=result.status.value,
            sent=[a.channel.value for a in result.sent],
            failed=[a.channel.value for a in result.failed],
        )
        return result

    def _send(self, result: NotificationResult, channel: NotificationChannel, address: str) -> None:
        try:
            transport = self._channel_resolver(channel)
            if channel == NotificationChannel.EMAIL:
                receipt = transport.send(to=address, subject=result.subject, body=result.body)
            else:
                receipt = transport.send(to=address, body=result.body)
        except Exception as e:
            receipt = SendReceipt(status="failed", error=str(e))

        if receipt.delivered:
            result.sent.append(ChannelAttempt(channel=channel, address=address, message_id=receipt.message_id))
        else:
            error = receipt.error or "Unknown dispatch error"
            result.failed.append(ChannelAttempt(channel=channel, address=address, error=error))
            logger.warning(
                "Channel send failed",
                order_id=result.order_id,
                channel=channel.value,
                error=error,
            )

    def _record(self, result: NotificationResult, now: datetime) -> None:
        entry = NotificationLogEntry(
            notification_id=result.log_entry_id,
            order_id=result.order_id,
            customer_id=result.customer_id,
            notification_type=result.notification_type,
            status=result.status,
            channels=[a.channel.value for a in result.sent],
            error_message=result.error,
            timestamp=now,
        )
        try:
            self._log.record(entry)
        except Exception as e:
            logger.error(
                "Error logging notification",
                notification_id=entry.notification_id,
                error=str(e),
            )
