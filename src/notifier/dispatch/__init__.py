"""Dispatch: fan a notification out across channels and report per-channel outcomes."""

from notifier.dispatch.dispatcher import NotificationDispatcher, validate_request
from notifier.dispatch.outcome import DispatchOutcome, DispatchStatus

__all__ = [
    "DispatchOutcome",
    "DispatchStatus",
    "NotificationDispatcher",
    "validate_request",
]
