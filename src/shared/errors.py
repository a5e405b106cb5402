"""Error taxonomy shared by every bounded context.

Lookups that miss raise a ``NotFound`` subclass, malformed input raises
``ValidationError`` and an unreachable collaborator raises
``CollaboratorUnavailable``. Fan-out operations never raise for partial
failures; they return itemized result objects instead.
"""


class LogisticsError(Exception):
    """Base class for all domain errors."""


class ValidationError(LogisticsError):
    """Malformed input. Carries field-keyed message lists."""

    def __init__(self, messages: dict[str, list[str]]):
        self.messages = messages
        super().__init__(messages)


class NotFound(LogisticsError):
    """An entity lookup missed."""

    entity = "Entity"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{self.entity} not found: {identifier}")


class OrderNotFound(NotFound):
    entity = "Order"


class TrackingNotFound(NotFound):
    entity = "Tracking ID"


class CustomerNotFound(NotFound):
    entity = "Customer"


class CollaboratorUnavailable(LogisticsError):
    """An external collaborator (store, signal source, transport) is unreachable."""

    def __init__(self, collaborator: str, reason: str):
        self.collaborator = collaborator
        self.reason = reason
        super().__init__(f"{collaborator} unavailable: {reason}")
