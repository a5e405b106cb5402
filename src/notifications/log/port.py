"""Notification log port: audit trail of notification attempts."""

from abc import ABC, abstractmethod

from notifications.notification.notification import NotificationLogEntry


class NotificationLogPort(ABC):
    """Abstract interface for notification log adapters."""

    @abstractmethod
    def record(self, entry: NotificationLogEntry) -> None:
        """Persist one log entry."""
        ...

    @abstractmethod
    def entries_for(self, order_id: str) -> list[NotificationLogEntry]:
        """Return all entries recorded for an order, oldest first."""
        ...
