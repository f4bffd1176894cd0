"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state with no cross-user
sharing. State tracks the simulated recipient so follow-up requests can
reference the same preferences.
"""

from dataclasses import dataclass, field


@dataclass
class RecipientState:
    """Tracks state for a single simulated notification recipient."""

    user_id: str | None = None
    channels: list[str] = field(default_factory=list)
    dispatch_count: int = 0
    failed_outcomes: int = 0
