"""Delivery failed template: sent after an unsuccessful delivery attempt."""

from notifications.notification.notification import NotificationType


class DeliveryFailedTemplate:
    notification_type = NotificationType.DELIVERY_FAILED
    subject = "Delivery Failed - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        reason = data.get("reason", "recipient unavailable")
        return (
            f"We were unable to deliver your order {order_id}. Reason: {reason}. "
            "We will attempt redelivery tomorrow."
        )
