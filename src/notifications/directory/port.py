"""Customer directory port: resolves a customer id to contact channels."""

from abc import ABC, abstractmethod

from notifications.notification.notification import CustomerContact


class CustomerDirectory(ABC):
    """Abstract interface for customer directory adapters."""

    @abstractmethod
    def get_contact(self, customer_id: str) -> CustomerContact | None:
        """Return the customer's contact details, or None when unknown."""
        ...
