"""Runtime settings, read from environment variables."""

import math
import os
from dataclasses import dataclass

from notifier.channel import BUILTIN_CHANNELS

DISPATCH_MODES = ("concurrent", "sequential")


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    channel_adapter: str = "fake"
    channels: tuple[str, ...] = BUILTIN_CHANNELS[:3]
    dispatch_mode: str = "concurrent"
    dispatch_timeout_seconds: float | None = 10.0
    max_workers: int | None = None

    @property
    def sequential(self) -> bool:
        return self.dispatch_mode == "sequential"


def load_settings(environ=None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ValueError: a variable is set to something unusable; the message names it.
    """
    env = os.environ if environ is None else environ

    channels = tuple(
        name.strip() for name in env.get("NOTIFIER_CHANNELS", ",".join(BUILTIN_CHANNELS[:3])).split(",") if name.strip()
    )
    if not channels:
        raise ValueError("NOTIFIER_CHANNELS must name at least one channel")

    dispatch_mode = env.get("NOTIFIER_DISPATCH_MODE", "concurrent").strip().lower()
    if dispatch_mode not in DISPATCH_MODES:
        raise ValueError(f"NOTIFIER_DISPATCH_MODE must be one of {DISPATCH_MODES}, got {dispatch_mode!r}")

    return Settings(
        environment=env.get("NOTIFIER_ENV", "development").strip().lower(),
        channel_adapter=env.get("NOTIFIER_CHANNEL_ADAPTER", "fake").strip().lower(),
        channels=channels,
        dispatch_mode=dispatch_mode,
        dispatch_timeout_seconds=_optional_positive_float(env, "NOTIFIER_DISPATCH_TIMEOUT_SECONDS", "10"),
        max_workers=_optional_positive_int(env, "NOTIFIER_MAX_WORKERS"),
    )


def _optional_positive_float(env, name: str, default: str | None = None) -> float | None:
    raw = env.get(name, default)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Invalid number for {name}: {raw!r}") from None
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite number >= 0")
    return value or None


def _optional_positive_int(env, name: str) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value
