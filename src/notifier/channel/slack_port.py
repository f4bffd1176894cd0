"""Slack channel port: abstract interface for Slack dispatch."""

from abc import abstractmethod

from notifier.channel.base import Channel
from notifier.content import Content


class SlackChannel(Channel):
    """The recipient is a Slack channel (e.g. ``#operations``)."""

    name = "Slack"

    def send(self, recipient: str, content: Content) -> dict:
        message = f"*{content.title}*\n{content.plain_body}"
        blocks = [{"type": "section", "text": {"type": "mrkdwn", "text": message}}]
        if content.action_url:
            blocks.append(
                {
                    "type": "actions",
                    "elements": [
                        {
                            "type": "button",
                            "text": {"type": "plain_text", "text": content.action_text or "Open"},
                            "url": content.action_url,
                        }
                    ],
                }
            )
        return self.deliver(channel=recipient, message=message, blocks=blocks)

    @abstractmethod
    def deliver(
        self,
        channel: str,
        message: str,
        blocks: list | None = None,
    ) -> dict:
        """Send a Slack message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
