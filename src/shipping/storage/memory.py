"""In-memory key-value backend: process-local storage for development and tests."""

import threading
from collections.abc import Callable

from pydantic import BaseModel

from shared.errors import CollaboratorUnavailable
from shipping.storage.port import KeyValueBackend


class MemoryBackend(KeyValueBackend):
    """Dict-backed store. Batches are applied under a single lock."""

    def __init__(self):
        self._data: dict[str, dict[str, BaseModel]] = {}
        self._lock = threading.Lock()
        self.should_succeed = True
        self.failure_reason = "Storage unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Storage unavailable"):
        """Configure the backend to simulate an outage."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def _check_available(self) -> None:
        if not self.should_succeed:
            raise CollaboratorUnavailable("storage", self.failure_reason)

    def get(self, namespace: str, key: str) -> BaseModel | None:
        self._check_available()
        with self._lock:
            value = self._data.get(namespace, {}).get(key)
            return value.model_copy(deep=True) if value is not None else None

    def put_many(self, items: list[tuple[str, str, BaseModel]]) -> None:
        self._check_available()
        copies = [(namespace, key, value.model_copy(deep=True)) for namespace, key, value in items]
        with self._lock:
            for namespace, key, value in copies:
                self._data.setdefault(namespace, {})[key] = value

    def scan(self, namespace: str, predicate: Callable[[BaseModel], bool] | None = None) -> list[BaseModel]:
        self._check_available()
        with self._lock:
            values = list(self._data.get(namespace, {}).values())
        return [value.model_copy(deep=True) for value in values if predicate is None or predicate(value)]

    def reset(self):
        """Drop all data (useful between tests)."""
        with self._lock:
            self._data.clear()
        self.should_succeed = True
        self.failure_reason = "Storage unavailable"
