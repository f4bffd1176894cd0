"""In-memory preference store.

Stands in for the durable preference service. Values are stored and returned
as copies so callers can never mutate the stored order.
"""

import threading
from collections.abc import Sequence

import structlog
from notifier.channel.registry import ChannelRegistry
from notifier.preference.resolver import PreferenceResolver, clean_preferences

logger = structlog.get_logger(__name__)


class InMemoryPreferenceStore(PreferenceResolver):
    def __init__(self, registry: ChannelRegistry):
        self._registry = registry
        self._lock = threading.Lock()
        self._preferences: dict[str, tuple[str, ...]] = {}

    def get(self, user_id: str) -> list[str]:
        key = user_id.strip() if isinstance(user_id, str) else user_id
        with self._lock:
            stored = self._preferences.get(key)
        if stored is None:
            return self._registry.list_names()
        return list(stored)

    def put(self, user_id: str, channel_names: Sequence[str]) -> None:
        key, names = clean_preferences(user_id, channel_names)
        with self._lock:
            self._preferences[key] = tuple(names)
        logger.info("Preferences updated", user_id=key, channels=names)

    def delete(self, user_id: str) -> None:
        key = user_id.strip() if isinstance(user_id, str) else user_id
        with self._lock:
            removed = self._preferences.pop(key, None)
        if removed is not None:
            logger.info("Preferences cleared", user_id=key)

    def has_preferences(self, user_id: str) -> bool:
        key = user_id.strip() if isinstance(user_id, str) else user_id
        with self._lock:
            return key in self._preferences
