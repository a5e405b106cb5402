"""Generic status update template: fallback for unrecognized notification types."""


class StatusUpdateTemplate:
    notification_type = None
    subject = "Order Update - Smart Logistics"

    @staticmethod
    def render(order_id: str, data: dict) -> str:
        message = data.get("message") or "Status updated"
        return f"Update for order {order_id}: {message}"
