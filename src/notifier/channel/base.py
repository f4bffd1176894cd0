"""Channel abstraction: the only capability the dispatcher relies on."""

from abc import ABC, abstractmethod

from notifier.content import Content


def normalize_channel_name(name: str) -> str:
    """Canonical lookup key for a channel name (case and whitespace insensitive)."""
    if not isinstance(name, str):
        return ""
    return name.strip().casefold()


class Channel(ABC):
    """A named delivery target.

    Subclasses set ``name`` and implement ``send``. The dispatcher never looks
    at the concrete type; it only reads ``name`` and calls ``send``.
    """

    name: str = ""

    @abstractmethod
    def send(self, recipient: str, content: Content) -> dict:
        """Deliver ``content`` to ``recipient``.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
