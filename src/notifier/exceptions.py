"""Error taxonomy for the notifier.

Only ``ValidationError`` ever escapes a dispatch. Channel lookups and send
failures are recovered per channel and reported in the outcome list.
"""


class NotifierError(Exception):
    """Base class for all notifier errors."""


class ValidationError(NotifierError):
    """Raised when a request, preference update or content value is malformed.

    ``messages`` maps a field name to the list of problems found with it,
    ``code`` is a machine-readable reason suitable for API responses.
    """

    def __init__(self, messages: dict[str, list[str]], code: str = "invalid_request"):
        self.messages = messages
        self.code = code
        super().__init__(messages)

    def __str__(self) -> str:
        return "; ".join(f"{field}: {', '.join(errors)}" for field, errors in self.messages.items())


class ChannelNotFound(LookupError, NotifierError):
    """Raised by the registry when no channel is bound to a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No channel registered under name: {name!r}")
