"""Notifications bounded context: customer notifications over SMS and email.

Renders order notifications from templates, resolves customer contact
channels through the customer directory, dispatches through channel
adapters and keeps an audit log of every attempt.
"""

import structlog

from notifications.directory import get_directory
from notifications.log import get_notification_log
from notifications.notification.dispatch import NotificationDispatcher
from notifications.notification.notification import CustomerContact, NotificationResult, NotificationType

logger = structlog.get_logger(__name__)

_dispatcher_instance: NotificationDispatcher | None = None


def get_notification_dispatcher() -> NotificationDispatcher:
    """Return the process-wide notification dispatcher (singleton)."""
    global _dispatcher_instance
    if _dispatcher_instance is None:
        _dispatcher_instance = NotificationDispatcher(get_directory(), get_notification_log())
    return _dispatcher_instance


def reset_notification_dispatcher():
    """Reset the dispatcher singleton (useful for testing)."""
    global _dispatcher_instance
    _dispatcher_instance = None


def dispatch_notification(
    order_id: str,
    customer_id: str,
    notification_type: NotificationType | str,
    data: dict | None = None,
) -> NotificationResult:
    return get_notification_dispatcher().notify(order_id, customer_id, notification_type, data)


def register_customer_contact(contact: CustomerContact) -> None:
    """Seed the customer directory with a customer's contact channels."""
    get_directory().register(contact)
    logger.debug(
        "Customer contact registered",
        customer_id=contact.customer_id,
        has_phone=bool(contact.phone),
        has_email=bool(contact.email),
    )
