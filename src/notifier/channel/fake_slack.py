"""Fake Slack adapter: records sent messages for testing."""

from notifier.channel.fake import FakeAdapterMixin
from notifier.channel.slack_port import SlackChannel


class FakeSlackChannel(FakeAdapterMixin, SlackChannel):
    """Slack adapter that records messages in memory for test assertions."""

    prefix = "slack"
    default_failure = "Slack delivery failed"

    def __init__(self):
        super().__init__()
        self.sent_messages: list[dict] = []

    def deliver(
        self,
        channel: str,
        message: str,
        blocks: list | None = None,
    ) -> dict:
        failure = self._attempt()
        if failure is not None:
            return failure

        message_id = self._new_message_id()
        self.sent_messages.append(
            {
                "message_id": message_id,
                "channel": channel,
                "message": message,
                "blocks": blocks,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent messages (useful between tests)."""
        super().reset()
        self.sent_messages.clear()
