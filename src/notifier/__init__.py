"""Notifier: routes a notification to a user's preferred delivery channels.

Channels are looked up by name in a registry, content is adapted per channel
by the formatter, and the dispatcher isolates failures so one broken channel
never stops the others.
"""

from notifier.channel import Channel, ChannelRegistry
from notifier.content import Content
from notifier.dispatch import DispatchOutcome, DispatchStatus, NotificationDispatcher
from notifier.exceptions import ChannelNotFound, NotifierError, ValidationError
from notifier.formatter import ContentFormatter
from notifier.preference import InMemoryPreferenceStore, PreferenceResolver

__all__ = [
    "Channel",
    "ChannelNotFound",
    "ChannelRegistry",
    "Content",
    "ContentFormatter",
    "DispatchOutcome",
    "DispatchStatus",
    "InMemoryPreferenceStore",
    "NotificationDispatcher",
    "NotifierError",
    "PreferenceResolver",
    "ValidationError",
]
