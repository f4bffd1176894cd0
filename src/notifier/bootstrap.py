"""Composition root: wires registry, preferences, formatter and dispatcher.

Everything is created once per process (or per application instance) and
shared by reference. Nothing here is a module-level singleton, so tests can
build as many independent containers as they need.
"""

from dataclasses import dataclass

import structlog
from notifier.channel import ChannelRegistry, build_registry
from notifier.config import Settings, load_settings
from notifier.dispatch import NotificationDispatcher
from notifier.formatter import ContentFormatter
from notifier.preference import InMemoryPreferenceStore, PreferenceResolver

logger = structlog.get_logger(__name__)


@dataclass
class Container:
    settings: Settings
    registry: ChannelRegistry
    preferences: PreferenceResolver
    formatter: ContentFormatter
    dispatcher: NotificationDispatcher


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or load_settings()

    registry = build_registry(settings.channels, adapter=settings.channel_adapter)
    preferences = InMemoryPreferenceStore(registry)
    formatter = ContentFormatter()
    dispatcher = NotificationDispatcher(
        registry,
        preferences,
        formatter,
        sequential=settings.sequential,
        max_workers=settings.max_workers,
        default_deadline=settings.dispatch_timeout_seconds,
    )

    logger.info(
        "Notifier initialised",
        environment=settings.environment,
        channels=registry.list_names(),
        dispatch_mode=settings.dispatch_mode,
        timeout_seconds=settings.dispatch_timeout_seconds,
    )
    return Container(
        settings=settings,
        registry=registry,
        preferences=preferences,
        formatter=formatter,
        dispatcher=dispatcher,
    )
