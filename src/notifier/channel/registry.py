"""Channel registry: name-keyed directory of delivery targets.

Lookups are case-insensitive and ignore surrounding whitespace, since channel
names usually come from user-editable preference data.

Writers serialise on a lock and publish a fresh mapping (copy-on-write).
Readers grab the current mapping reference without locking, so a lookup that
races a registration sees either the old binding or the new one.
"""

import threading
from collections.abc import Iterable

import structlog
from notifier.channel.base import Channel, normalize_channel_name
from notifier.exceptions import ChannelNotFound

logger = structlog.get_logger(__name__)


class ChannelRegistry:
    def __init__(self, channels: Iterable[Channel] = ()):
        self._lock = threading.Lock()
        self._channels: dict[str, Channel] = {}
        for channel in channels:
            self.register(channel)

    def register(self, channel: Channel) -> None:
        """Bind ``channel`` under its name, replacing any previous binding."""
        name = getattr(channel, "name", None)
        key = normalize_channel_name(name)
        if not key:
            raise ValueError(f"Channel must have a non-empty name: {channel!r}")

        with self._lock:
            updated = dict(self._channels)
            replaced = updated.get(key)
            updated[key] = channel
            self._channels = updated

        if replaced is not None and replaced is not channel:
            logger.info("Channel binding replaced", channel=name)
        else:
            logger.debug("Channel registered", channel=name)

    def unregister(self, name: str) -> Channel:
        """Remove and return the channel bound to ``name``."""
        key = normalize_channel_name(name)
        with self._lock:
            if key not in self._channels:
                raise ChannelNotFound(name)
            updated = dict(self._channels)
            removed = updated.pop(key)
            self._channels = updated

        logger.info("Channel unregistered", channel=removed.name)
        return removed

    def resolve(self, name: str) -> Channel:
        """Return the channel bound to ``name`` or raise ChannelNotFound."""
        channels = self._channels
        try:
            return channels[normalize_channel_name(name)]
        except KeyError:
            raise ChannelNotFound(name) from None

    def list_names(self) -> list[str]:
        """Names of all registered channels, in registration order."""
        return [channel.name for channel in self._channels.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_channel_name(name) in self._channels

    def __len__(self) -> int:
        return len(self._channels)
