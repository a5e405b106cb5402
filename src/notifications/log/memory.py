"""In-memory notification log."""

import threading

from notifications.log.port import NotificationLogPort
from notifications.notification.notification import NotificationLogEntry
from shared.errors import CollaboratorUnavailable


class InMemoryNotificationLog(NotificationLogPort):
    def __init__(self):
        self.entries: list[NotificationLogEntry] = []
        self._lock = threading.Lock()
        self.should_succeed = True

    def configure(self, should_succeed: bool = True):
        """Configure the log to simulate a write outage."""
        self.should_succeed = should_succeed

    def record(self, entry: NotificationLogEntry) -> None:
        if not self.should_succeed:
            raise CollaboratorUnavailable("notification log", "write rejected")
        with self._lock:
            self.entries.append(entry)

    def entries_for(self, order_id: str) -> list[NotificationLogEntry]:
        with self._lock:
            return [entry for entry in self.entries if entry.order_id == order_id]

    def reset(self):
        with self._lock:
            self.entries.clear()
        self.should_succeed = True
