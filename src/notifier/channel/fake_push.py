"""Fake push notification adapter: records sent pushes for testing."""

from notifier.channel.fake import FakeAdapterMixin
from notifier.channel.push_port import PushChannel


class FakePushChannel(FakeAdapterMixin, PushChannel):
    """Push adapter that records notifications in memory for test assertions."""

    prefix = "push"
    default_failure = "Push delivery failed"

    def __init__(self):
        super().__init__()
        self.sent_pushes: list[dict] = []

    def deliver(
        self,
        device_token: str,
        title: str,
        body: str,
        data: dict | None = None,
    ) -> dict:
        failure = self._attempt()
        if failure is not None:
            return failure

        message_id = self._new_message_id()
        self.sent_pushes.append(
            {
                "message_id": message_id,
                "device_token": device_token,
                "title": title,
                "body": body,
                "data": data,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent pushes (useful between tests)."""
        super().reset()
        self.sent_pushes.clear()
