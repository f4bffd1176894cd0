"""Channel adapters: pluggable notification delivery targets.

Builds the adapters a process starts with. Uses fake adapters by default;
real provider adapters (SendGrid, Twilio, FCM, Slack API) would be selected
through the NOTIFIER_CHANNEL_ADAPTER setting.
"""

from notifier.channel.base import Channel, normalize_channel_name
from notifier.channel.registry import ChannelRegistry

BUILTIN_CHANNELS = ("Email", "SMS", "Push", "Slack")


def create_channel(channel_name: str, adapter: str = "fake") -> Channel:
    """Instantiate the adapter for one of the built-in channel names.

    Args:
        channel_name: One of "Email", "SMS", "Push", "Slack" (case-insensitive)
        adapter: Adapter family; only "fake" ships with the service
    """
    if adapter != "fake":
        raise ValueError(f"Unknown channel adapter: {adapter}")

    key = normalize_channel_name(channel_name)
    if key == "email":
        from notifier.channel.fake_email import FakeEmailChannel

        return FakeEmailChannel()
    elif key == "sms":
        from notifier.channel.fake_sms import FakeSMSChannel

        return FakeSMSChannel()
    elif key == "push":
        from notifier.channel.fake_push import FakePushChannel

        return FakePushChannel()
    elif key == "slack":
        from notifier.channel.fake_slack import FakeSlackChannel

        return FakeSlackChannel()
    else:
        raise ValueError(f"Unknown channel type: {channel_name}")


def build_registry(channel_names=BUILTIN_CHANNELS[:3], adapter: str = "fake") -> ChannelRegistry:
    """Create a registry populated with one adapter per name, in order."""
    return ChannelRegistry(create_channel(name, adapter) for name in channel_names)


__all__ = [
    "BUILTIN_CHANNELS",
    "Channel",
    "ChannelRegistry",
    "build_registry",
    "create_channel",
    "normalize_channel_name",
]
