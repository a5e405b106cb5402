"""In-memory transports that record every delivered message for assertions."""

from uuid import uuid4

from notifications.channel.port import EmailPort, SendReceipt, SMSPort


class _RecordingTransport:
    message_prefix = "msg"
    default_failure = "Delivery failed"

    def __init__(self):
        self.delivered: list[dict] = []
        self.attempts = 0
        self.should_succeed = True
        self.failure_reason = self.default_failure

    def configure(self, should_succeed: bool = True, failure_reason: str | None = None):
        """Make subsequent sends succeed or fail with ``failure_reason``."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason or self.default_failure

    def _deliver(self, message: dict) -> SendReceipt:
        self.attempts += 1
        if not self.should_succeed:
            return SendReceipt(status="failed", error=self.failure_reason)

        message_id = f"{self.message_prefix}-{uuid4().hex[:12]}"
        self.delivered.append({"message_id": message_id, **message})
        return SendReceipt(status="sent", message_id=message_id)

    def reset(self):
        self.delivered.clear()
        self.attempts = 0
        self.should_succeed = True
        self.failure_reason = self.default_failure


class FakeSMSAdapter(_RecordingTransport, SMSPort):
    message_prefix = "sms"
    default_failure = "SMS delivery failed"

    @property
    def sent_messages(self) -> list[dict]:
        return self.delivered

    def send(self, to: str, body: str) -> SendReceipt:
        return self._deliver({"to": to, "body": body})


class FakeEmailAdapter(_RecordingTransport, EmailPort):
    message_prefix = "email"
    default_failure = "Email delivery failed"

    @property
    def sent_emails(self) -> list[dict]:
        return self.delivered

    def send(self, to: str, subject: str, body: str) -> SendReceipt:
        return self._deliver({"to": to, "subject": subject, "body": body})
