"""Shared behaviour for the in-memory fake adapters."""

import time
from uuid import uuid4


class FakeAdapterMixin:
    """Configurable success/failure and simulated latency for fake adapters.

    Subclasses set ``prefix`` (message id prefix) and ``default_failure``.
    """

    prefix = "msg"
    default_failure = "Delivery failed"

    def __init__(self):
        self.should_succeed = True
        self.failure_reason = self.default_failure
        self.delay_seconds = 0.0

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str | None = None,
        delay_seconds: float = 0.0,
    ):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason or self.default_failure
        self.delay_seconds = delay_seconds

    def reset(self):
        """Restore default behavior (useful between tests)."""
        self.should_succeed = True
        self.failure_reason = self.default_failure
        self.delay_seconds = 0.0

    def _attempt(self) -> dict | None:
        """Apply configured latency; return a failure result when configured to fail."""
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }
        return None

    def _new_message_id(self) -> str:
        return f"{self.prefix}-{uuid4().hex[:12]}"
