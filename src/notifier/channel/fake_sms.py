"""Fake SMS adapter: records sent messages for testing."""

from notifier.channel.fake import FakeAdapterMixin
from notifier.channel.sms_port import SMSChannel


class FakeSMSChannel(FakeAdapterMixin, SMSChannel):
    """SMS adapter that records messages in memory for test assertions."""

    prefix = "sms"
    default_failure = "SMS delivery failed"

    def __init__(self):
        super().__init__()
        self.sent_messages: list[dict] = []

    def deliver(self, to: str, body: str) -> dict:
        failure = self._attempt()
        if failure is not None:
            return failure

        message_id = self._new_message_id()
        self.sent_messages.append({"message_id": message_id, "to": to, "body": body})
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent messages (useful between tests)."""
        super().reset()
        self.sent_messages.clear()
