"""Notification dispatcher: best-effort fan-out across a user's channels.

Each ``dispatch`` call walks the same short-lived sequence:

    validate → resolve preferences → per channel (look up → format → send)
    → aggregate

Validation is the only step that can fail the call. An unknown channel name
(or a preference entry that is not a name at all) becomes a SkippedUnavailable
outcome, and a failing or hanging channel becomes a Failed outcome; neither
affects the other channels. Callers inspect the returned outcomes to learn
about partial failure.
"""

import math
import threading
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import timedelta

import structlog
from notifier.channel.base import Channel, normalize_channel_name
from notifier.channel.registry import ChannelRegistry
from notifier.content import Content
from notifier.dispatch.outcome import TIMEOUT_DETAIL, DispatchOutcome
from notifier.exceptions import ChannelNotFound, ValidationError
from notifier.formatter import ContentFormatter
from notifier.preference.resolver import PreferenceResolver

logger = structlog.get_logger(__name__)


def validate_request(user_id, contact, content) -> None:
    """Raise ValidationError for a malformed dispatch request."""
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError({"user_id": ["user_id is required and cannot be empty"]}, code="missing_user_id")
    if not isinstance(contact, str) or not contact.strip():
        raise ValidationError({"contact": ["contact is required and cannot be empty"]}, code="missing_contact")
    if content is None:
        raise ValidationError({"content": ["content is required"]}, code="missing_content")
    if not isinstance(content, Content):
        raise ValidationError({"content": ["content must be a Content value"]}, code="invalid_content")
    content.validate()


def resolve_deadline(deadline) -> float | None:
    """Return the deadline in seconds, or None for no deadline.

    Accepts seconds or a ``timedelta``. Anything that is not a finite number
    in ``(0, threading.TIMEOUT_MAX)`` raises ValidationError.
    """
    if deadline is None:
        return None
    if isinstance(deadline, timedelta):
        deadline = deadline.total_seconds()
    if isinstance(deadline, bool) or not isinstance(deadline, (int, float)):
        raise ValidationError({"deadline": ["deadline must be a number of seconds"]}, code="invalid_deadline")
    if not math.isfinite(deadline) or deadline <= 0:
        raise ValidationError({"deadline": ["deadline must be a positive number of seconds"]}, code="invalid_deadline")
    if deadline >= threading.TIMEOUT_MAX:
        raise ValidationError(
            {"deadline": [f"deadline must be below {threading.TIMEOUT_MAX:.0f} seconds"]},
            code="invalid_deadline",
        )
    return float(deadline)


class NotificationDispatcher:
    """Routes one notification to every channel a user prefers.

    Args:
        registry: Channel directory, shared with whoever registers channels
        preferences: Source of each user's ordered channel list
        formatter: Per-channel content adaptation (defaults to ContentFormatter())
        sequential: Send one channel at a time, in preference order
        max_workers: Upper bound on concurrent sends within one dispatch
        default_deadline: Seconds a dispatch may take when the caller gives none
            (None waits for every send to finish)
    """

    def __init__(
        self,
        registry: ChannelRegistry,
        preferences: PreferenceResolver,
        formatter: ContentFormatter | None = None,
        *,
        sequential: bool = False,
        max_workers: int | None = None,
        default_deadline: float | None = None,
    ):
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if default_deadline is not None:
            try:
                default_deadline = resolve_deadline(default_deadline)
            except ValidationError as e:
                raise ValueError(f"Invalid default_deadline: {e}") from None
        self._registry = registry
        self._preferences = preferences
        self._formatter = formatter or ContentFormatter()
        self._sequential = sequential
        self._max_workers = max_workers
        self._default_deadline = default_deadline

    # -------------------------------------------------------------------
    # Registry and preference surface
    # -------------------------------------------------------------------
    def register_channel(self, channel: Channel) -> None:
        self._registry.register(channel)

    def list_channel_names(self) -> list[str]:
        return self._registry.list_names()

    def get_preferences(self, user_id: str) -> list[str]:
        return self._preferences.get(user_id)

    def set_preferences(self, user_id: str, channel_names: Sequence[str]) -> None:
        self._preferences.put(user_id, channel_names)

    # -------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------
    def dispatch(
        self,
        user_id: str,
        contact: str,
        content: Content,
        deadline: float | timedelta | None = None,
    ) -> list[DispatchOutcome]:
        """Send ``content`` to ``contact`` on each of the user's preferred channels.

        Returns:
            One DispatchOutcome per attempted channel name, in preference order.

        Raises:
            ValidationError: user_id, contact, content or deadline is malformed.
                No channel has been touched when this is raised.
        """
        validate_request(user_id, contact, content)
        timeout = resolve_deadline(self._default_deadline if deadline is None else deadline)

        user_id = user_id.strip()
        contact = contact.strip()

        outcomes: list[DispatchOutcome | None] = []
        deliveries: list[tuple[int, Channel]] = []
        seen: set[str] = set()
        for requested in self._preferences.get(user_id):
            key = normalize_channel_name(requested)
            if not key:
                label = requested.strip() if isinstance(requested, str) else repr(requested)
                logger.warning("Preference entry is not a channel name, skipping", user_id=user_id, entry=label)
                outcomes.append(DispatchOutcome.skipped(label))
                continue
            if key in seen:
                continue
            seen.add(key)

            try:
                channel = self._registry.resolve(requested)
            except ChannelNotFound:
                logger.info("Preferred channel unavailable, skipping", user_id=user_id, channel=requested)
                outcomes.append(DispatchOutcome.skipped(requested.strip()))
                continue

            deliveries.append((len(outcomes), channel))
            outcomes.append(None)

        if deliveries:
            self._fan_out(deliveries, contact, content, timeout, outcomes)

        logger.info(
            "Notification dispatched",
            user_id=user_id,
            outcomes={outcome.channel_name: outcome.status.value for outcome in outcomes},
        )
        return outcomes

    def _fan_out(
        self,
        deliveries: list[tuple[int, Channel]],
        contact: str,
        content: Content,
        timeout: float | None,
        outcomes: list[DispatchOutcome | None],
    ) -> None:
        """Run the sends and fill their slots in ``outcomes``.

        Sends still running (or still queued) when ``timeout`` expires are
        recorded as timed out; the executor is abandoned rather than joined.
        A running send is not interrupted. Its worker thread finishes in the
        background, and the interpreter joins it at exit, so an adapter that
        never returns delays process shutdown after ``dispatch`` has returned.
        Adapters are expected to bound their own I/O with transport timeouts.
        """
        workers = 1 if self._sequential else len(deliveries)
        if self._max_workers is not None:
            workers = min(workers, self._max_workers)

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="notifier-send")
        try:
            futures = {
                executor.submit(self._deliver, channel, contact, content): (position, channel)
                for position, channel in deliveries
            }
            done, not_done = wait(futures, timeout=timeout)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        for future in done:
            position, _channel = futures[future]
            outcomes[position] = future.result()

        for future in not_done:
            position, channel = futures[future]
            logger.warning("Channel send timed out", channel=channel.name, timeout=timeout)
            outcomes[position] = DispatchOutcome.failed(channel.name, TIMEOUT_DETAIL)

    def _deliver(self, channel: Channel, contact: str, content: Content) -> DispatchOutcome:
        """Format and send on one channel. Never raises."""
        try:
            adapted = self._formatter.format(channel.name, content)
            result = channel.send(contact, adapted)
        except Exception as e:
            logger.error("Channel send raised", channel=channel.name, error=str(e), exc_info=True)
            return DispatchOutcome.failed(channel.name, str(e) or type(e).__name__)

        if isinstance(result, Mapping) and result.get("status") == "sent":
            return DispatchOutcome.sent(channel.name, result.get("message_id"))

        error = result.get("error") if isinstance(result, Mapping) else None
        detail = error or f"Unexpected send result: {result!r}"
        logger.warning("Channel send failed", channel=channel.name, error=detail)
        return DispatchOutcome.failed(channel.name, detail)
