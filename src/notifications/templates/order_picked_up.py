"""Order picked up template: sent when the courier collects the package."""

from notifications.notification.notification import NotificationType


class OrderPickedUpTemplate:
    notification_type = NotificationType.ORDER_PICKED_UP
    subject = "Order Picked Up - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        tracking_url = data.get("tracking_url", "N/A")
        return f"Your order {order_id} has been picked up and is on its way. Track your package: {tracking_url}"
