"""Delivered template: sent on confirmed delivery."""

from notifications.notification.notification import NotificationType


class DeliveredTemplate:
    notification_type = NotificationType.DELIVERED
    subject = "Order Delivered - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        return f"Your order {order_id} has been successfully delivered. Thank you for choosing our service!"
