"""Preference resolver: which channels a user wants, in delivery order."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from notifier.exceptions import ValidationError


class PreferenceResolver(ABC):
    """Two-operation contract the dispatcher reads preferences through.

    ``get`` never fails for an unknown user: with nothing stored it returns
    every channel currently available.
    """

    @abstractmethod
    def get(self, user_id: str) -> list[str]: ...

    @abstractmethod
    def put(self, user_id: str, channel_names: Sequence[str]) -> None:
        """Replace the stored channel list wholesale."""
        ...

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Forget the stored list so the fallback applies again."""
        ...

    @abstractmethod
    def has_preferences(self, user_id: str) -> bool: ...


def clean_preferences(user_id, channel_names) -> tuple[str, list[str]]:
    """Validate a preference update and return normalised copies of its parts."""
    errors: dict[str, list[str]] = {}

    if not isinstance(user_id, str) or not user_id.strip():
        errors["user_id"] = ["user_id is required and cannot be empty"]

    names: list[str] = []
    if isinstance(channel_names, str) or not isinstance(channel_names, Sequence):
        errors["channel_names"] = ["channel_names must be a list of channel names"]
    else:
        for position, name in enumerate(channel_names):
            if not isinstance(name, str) or not name.strip():
                errors.setdefault("channel_names", []).append(f"Entry {position} is not a channel name")
            else:
                names.append(name.strip())

    if errors:
        raise ValidationError(errors, code="invalid_preferences")

    return user_id.strip(), names
