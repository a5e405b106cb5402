"""Out for delivery template."""

from notifications.notification.notification import NotificationType


class OutForDeliveryTemplate:
    notification_type = NotificationType.OUT_FOR_DELIVERY
    subject = "Order Out for Delivery - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        return f"Your order {order_id} is out for delivery. It will arrive within the next 2 hours."
