"""In-memory customer directory: seeded by the API layer and by tests."""

import threading

from notifications.directory.port import CustomerDirectory
from notifications.notification.notification import CustomerContact


class InMemoryCustomerDirectory(CustomerDirectory):
    def __init__(self):
        self._contacts: dict[str, CustomerContact] = {}
        self._lock = threading.Lock()

    def register(self, contact: CustomerContact) -> None:
        """Add or replace a customer's contact details."""
        with self._lock:
            self._contacts[contact.customer_id] = contact.model_copy()

    def get_contact(self, customer_id: str) -> CustomerContact | None:
        with self._lock:
            contact = self._contacts.get(customer_id)
        return contact.model_copy() if contact is not None else None

    def reset(self):
        with self._lock:
            self._contacts.clear()
