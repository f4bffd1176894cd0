"""Push notification channel port: abstract interface for push dispatch."""

from abc import abstractmethod

from notifier.channel.base import Channel
from notifier.content import Content


class PushChannel(Channel):
    """The recipient is a device token; the action link travels in ``data``."""

    name = "Push"

    def send(self, recipient: str, content: Content) -> dict:
        data = None
        if content.action_url:
            data = {"action_url": content.action_url}
            if content.action_text:
                data["action_text"] = content.action_text
        return self.deliver(
            device_token=recipient,
            title=content.title,
            body=content.plain_body,
            data=data,
        )

    @abstractmethod
    def deliver(
        self,
        device_token: str,
        title: str,
        body: str,
        data: dict | None = None,
    ) -> dict:
        """Send a push notification.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
