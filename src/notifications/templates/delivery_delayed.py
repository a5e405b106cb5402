"""Delivery delayed template: sent when an order is autonomously delayed."""

from notifications.notification.notification import NotificationType


class DeliveryDelayedTemplate:
    notification_type = NotificationType.DELIVERY_DELAYED
    subject = "Delivery Delayed - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        reason = data.get("reason", "unforeseen conditions")
        new_estimated_delivery = data.get("new_estimated_delivery", "to be confirmed")
        return (
            f"Your order {order_id} delivery has been delayed due to {reason}. "
            f"New estimated delivery: {new_estimated_delivery}"
        )
