"""Key-value backend port: abstract interface for order persistence.

The Order Store programs against this port; adapters are swapped via
configuration. Values are pydantic models grouped by namespace.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import BaseModel


class KeyValueBackend(ABC):
    """Abstract interface for key-value persistence adapters."""

    @abstractmethod
    def get(self, namespace: str, key: str) -> BaseModel | None:
        """Return a copy of the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    def put_many(self, items: list[tuple[str, str, BaseModel]]) -> None:
        """Write every ``(namespace, key, value)`` triple as one atomic batch.

        Readers must observe either none or all of the batch.
        """
        ...

    @abstractmethod
    def scan(self, namespace: str, predicate: Callable[[BaseModel], bool] | None = None) -> list[BaseModel]:
        """Return copies of all values in ``namespace`` matching ``predicate``, in insertion order."""
        ...
