"""Fake email adapter: records sent emails for testing."""

from notifier.channel.email_port import EmailChannel
from notifier.channel.fake import FakeAdapterMixin


class FakeEmailChannel(FakeAdapterMixin, EmailChannel):
    """Email adapter that records messages in memory for test assertions."""

    prefix = "email"
    default_failure = "Email delivery failed"

    def __init__(self):
        super().__init__()
        self.sent_emails: list[dict] = []

    def deliver(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        failure = self._attempt()
        if failure is not None:
            return failure

        message_id = self._new_message_id()
        self.sent_emails.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "body": body,
                "html_body": html_body,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent emails (useful between tests)."""
        super().reset()
        self.sent_emails.clear()
