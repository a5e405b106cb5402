"""Transport ports for customer notifications.

Adapters report the outcome of a single send as a ``SendReceipt``; a
transport that cannot deliver returns a failed receipt rather than raising.
"""

from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel


class SendReceipt(BaseModel):
    status: Literal["sent", "failed"]
    message_id: str | None = None
    error: str | None = None

    @property
    def delivered(self) -> bool:
        return self.status == "sent"


class SMSPort(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> SendReceipt: ...


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> SendReceipt: ...
