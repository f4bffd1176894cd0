"""SMS channel port: abstract interface for SMS dispatch.

The 160-character limit is enforced here, at the channel, and not by the
content formatter. Push truncation lives in the formatter instead.
"""

from abc import abstractmethod

from notifier.channel.base import Channel
from notifier.content import Content, truncate

SMS_MAX_LENGTH = 160


class SMSChannel(Channel):
    """Sends the plain body only, cut to ``max_length`` characters."""

    name = "SMS"
    max_length = SMS_MAX_LENGTH

    def send(self, recipient: str, content: Content) -> dict:
        return self.deliver(to=recipient, body=truncate(content.plain_body, self.max_length))

    @abstractmethod
    def deliver(self, to: str, body: str) -> dict:
        """Send an SMS message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
