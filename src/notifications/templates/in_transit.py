"""In transit template: sent when the package moves between hubs."""

from notifications.notification.notification import NotificationType


class InTransitTemplate:
    notification_type = NotificationType.IN_TRANSIT
    subject = "Order In Transit - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        current_location = data.get("current_location", "en route")
        estimated_delivery = data.get("estimated_delivery", "to be confirmed")
        return (
            f"Your order {order_id} is in transit. Current location: {current_location}. "
            f"Expected delivery: {estimated_delivery}"
        )
