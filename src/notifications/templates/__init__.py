"""Template registry: maps NotificationType to template classes.

Every NotificationType has exactly one template. Type strings that do not
name a NotificationType render with the generic status update template.
"""

import structlog

from notifications.notification.notification import NotificationType, parse_notification_type
from notifications.templates.delivered import DeliveredTemplate
from notifications.templates.delivery_delayed import DeliveryDelayedTemplate
from notifications.templates.delivery_failed import DeliveryFailedTemplate
from notifications.templates.in_transit import InTransitTemplate
from notifications.templates.order_created import OrderCreatedTemplate
from notifications.templates.order_picked_up import OrderPickedUpTemplate
from notifications.templates.out_for_delivery import OutForDeliveryTemplate
from notifications.templates.status_update import StatusUpdateTemplate

logger = structlog.get_logger(__name__)

TEMPLATE_REGISTRY: dict[NotificationType, type] = {
    NotificationType.ORDER_CREATED: OrderCreatedTemplate,
    NotificationType.ORDER_PICKED_UP: OrderPickedUpTemplate,
    NotificationType.IN_TRANSIT: InTransitTemplate,
    NotificationType.OUT_FOR_DELIVERY: OutForDeliveryTemplate,
    NotificationType.DELIVERED: DeliveredTemplate,
    NotificationType.DELIVERY_DELAYED: DeliveryDelayedTemplate,
    NotificationType.DELIVERY_FAILED: DeliveryFailedTemplate,
}

_missing = set(NotificationType) - set(TEMPLATE_REGISTRY)
if _missing:
    raise RuntimeError(f"No template registered for: {sorted(t.value for t in _missing)}")


def get_template(notification_type: NotificationType | str):
    """Look up a template class, falling back to the generic status update."""
    parsed = parse_notification_type(notification_type)
    if parsed is None:
        logger.info("Unknown notification type, using generic template", notification_type=str(notification_type))
        return StatusUpdateTemplate
    return TEMPLATE_REGISTRY[parsed]


def render(notification_type: NotificationType | str, order_id: str, data: dict | None = None) -> dict:
    """Render subject and body for a notification."""
    template_cls = get_template(notification_type)
    return {
        "subject": template_cls.subject,
        "body": template_cls.render(order_id, data or {}),
    }
