"""Shipping bounded context: Order lifecycle and shipment tracking.

Owns orders and their tracking records. The Order Store is built once per
process from the configured storage backend; tests rebuild it per test.
"""

from datetime import timedelta

import structlog

from shared.config import get_settings
from shipping.order.store import OrderStore
from shipping.storage import get_backend

logger = structlog.get_logger(__name__)

_store_instance: OrderStore | None = None


def get_order_store() -> OrderStore:
    """Return the process-wide Order Store (singleton)."""
    global _store_instance
    if _store_instance is None:
        settings = get_settings()
        _store_instance = OrderStore(
            get_backend(),
            delivery_window=timedelta(hours=settings.DELIVERY_WINDOW_HOURS),
            strict_transitions=settings.STRICT_TRANSITIONS,
        )
        logger.debug(
            "Order store initialized",
            backend=settings.STORAGE_BACKEND,
            strict_transitions=settings.STRICT_TRANSITIONS,
        )
    return _store_instance


def reset_order_store():
    """Reset the store singleton (useful for testing)."""
    global _store_instance
    _store_instance = None
