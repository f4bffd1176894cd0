"""User channel preferences."""

from notifier.preference.resolver import PreferenceResolver
from notifier.preference.store import InMemoryPreferenceStore

__all__ = ["InMemoryPreferenceStore", "PreferenceResolver"]
