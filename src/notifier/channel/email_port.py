"""Email channel port: abstract interface for email dispatch."""

from abc import abstractmethod

from notifier.channel.base import Channel
from notifier.content import Content


class EmailChannel(Channel):
    """Maps Content onto an email: title as subject, plain and HTML bodies."""

    name = "Email"

    def send(self, recipient: str, content: Content) -> dict:
        return self.deliver(
            to=recipient,
            subject=content.title,
            body=content.plain_body,
            html_body=content.html_body,
        )

    @abstractmethod
    def deliver(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        """Send an email message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
