"""Autonomous action dispatcher: turns an impact verdict into order mutations.

For every affected location, orders whose delivery address contains the
location are moved to DELAYED. The fan-out is best effort: a failed order
is itemized in the report and processing continues, with no rollback of
orders already updated. Customers of updated orders are notified once all
mutations are done, so no store lock is held while a notification is in
flight.
"""

from datetime import datetime, timedelta

import structlog
from pydantic import BaseModel, Field

from notifications.notification.dispatch import NotificationDispatcher
from notifications.notification.notification import DispatchStatus, NotificationResult, NotificationType
from shipping.order.order import Order, OrderStatus
from shipping.order.store import OrderStore

logger = structlog.get_logger(__name__)

ORDER_STATUS_UPDATED = "order_status_updated"
CUSTOMERS_NOTIFIED = "customers_notified"

_IDLE_EFFECT = {
    "weather": "monitoring_continued",
    "traffic": "route_confirmed",
}
_ACTIVE_EFFECTS = {
    "weather": [],
    "traffic": ["route_optimized", "eta_updated"],
}


class FailedAction(BaseModel):
    target: str
    error: str


class ActionReport(BaseModel):
    """Itemized outcome of an autonomous fan-out."""

    pipeline: str
    reason_code: str | None = None
    updated: list[str] = Field(default_factory=list)
    failed: list[FailedAction] = Field(default_factory=list)
    notifications: list[NotificationResult] = Field(default_factory=list)
    notification_failures: list[FailedAction] = Field(default_factory=list)
    actions_taken: list[str] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed or self.notification_failures)

    @property
    def is_partial_failure(self) -> bool:
        return bool(self.updated) and self.has_failures


class ActionDispatcher:
    def __init__(self, store: OrderStore, notifier: NotificationDispatcher):
        self._store = store
        self._notifier = notifier

    def dispatch(
        self,
        verdict,
        reason_code: str,
        delay: timedelta | None = None,
        now: datetime | None = None,
    ) -> ActionReport:
        """Apply ``verdict``: delay affected orders and notify their customers."""
        pipeline = verdict.pipeline
        report = ActionReport(pipeline=pipeline, reason_code=reason_code)

        if not verdict.requires_action:
            report.actions_taken = [_IDLE_EFFECT[pipeline]]
            logger.info("No autonomous action required", pipeline=pipeline)
            return report

        updated_orders = self._delay_orders(report, verdict.affected_locations, reason_code, delay, now)
        self._notify_customers(report, updated_orders, reason_code)

        report.actions_taken = list(_ACTIVE_EFFECTS[pipeline])
        if report.updated:
            report.actions_taken.append(ORDER_STATUS_UPDATED)
        if any(n.status != DispatchStatus.FAILED for n in report.notifications):
            report.actions_taken.append(CUSTOMERS_NOTIFIED)
        if not report.actions_taken:
            report.actions_taken = [_IDLE_EFFECT[pipeline]]

        logger.info(
            "Autonomous actions completed",
            pipeline=pipeline,
            reason_code=reason_code,
            updated=len(report.updated),
            failed=len(report.failed),
            notified=len(report.notifications),
            notification_failures=len(report.notification_failures),
        )
        return report

    def _matching_order_ids(self, report: ActionReport, locations: list[str]) -> list[str]:
        order_ids: list[str] = []
        for location in locations:
            try:
                matches = self._store.find_by_delivery_address(location)
            except Exception as e:
                report.failed.append(FailedAction(target=f"location:{location}", error=str(e)))
                logger.error("Failed to look up orders for location", location=location, error=str(e))
                continue
            order_ids.extend(order_id for order_id in matches if order_id not in order_ids)
        return order_ids

    def _delay_orders(
        self,
        report: ActionReport,
        locations: list[str],
        reason_code: str,
        delay: timedelta | None,
        now: datetime | None,
    ) -> list[Order]:
        updated_orders = []
        for order_id in self._matching_order_ids(report, locations):
            try:
                order = self._store.update_status(
                    order_id,
                    OrderStatus.DELAYED,
                    reason=reason_code,
                    delay=delay,
                    now=now,
                )
            except Exception as e:
                report.failed.append(FailedAction(target=order_id, error=str(e)))
                logger.error("Failed to delay order", order_id=order_id, reason_code=reason_code, error=str(e))
                continue
            report.updated.append(order_id)
            updated_orders.append(order)
        return updated_orders

    def _notify_customers(self, report: ActionReport, orders: list[Order], reason_code: str) -> None:
        for order in orders:
            try:
                result = self._notifier.notify(
                    order.order_id,
                    order.customer.customer_id,
                    NotificationType.DELIVERY_DELAYED,
                    {
                        "reason": reason_code.replace("_", " "),
                        "new_estimated_delivery": order.estimated_delivery.isoformat(),
                    },
                )
            except Exception as e:
                report.notification_failures.append(FailedAction(target=order.order_id, error=str(e)))
                logger.warning("Delay notification not sent", order_id=order.order_id, error=str(e))
                continue
            report.notifications.append(result)
