"""Order created template: sent when a new order enters processing."""

from notifications.notification.notification import NotificationType


class OrderCreatedTemplate:
    notification_type = NotificationType.ORDER_CREATED
    subject = "Order Confirmation - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        estimated_delivery = data.get("estimated_delivery", "to be confirmed")
        return (
            f"Your order {order_id} has been created and is being processed. "
            f"Estimated delivery: {estimated_delivery}"
        )
