import pytest
from notifier.channel.fake_email import FakeEmailChannel
from notifier.channel.fake_push import FakePushChannel
from notifier.channel.fake_sms import FakeSMSChannel
from notifier.channel.registry import ChannelRegistry
from notifier.content import Content
from notifier.dispatch import NotificationDispatcher
from notifier.formatter import ContentFormatter
from notifier.preference import InMemoryPreferenceStore


@pytest.fixture()
def email():
    return FakeEmailChannel()


@pytest.fixture()
def sms():
    return FakeSMSChannel()


@pytest.fixture()
def push():
    return FakePushChannel()


@pytest.fixture()
def registry(email, sms, push):
    return ChannelRegistry([email, sms, push])


@pytest.fixture()
def preferences(registry):
    return InMemoryPreferenceStore(registry)


@pytest.fixture()
def dispatcher(registry, preferences):
    return NotificationDispatcher(registry, preferences, ContentFormatter(), default_deadline=5)


@pytest.fixture()
def content():
    return Content(
        title="Order Confirmed",
        plain_body="Total: $42",
        action_url="https://x/o/1",
        action_text="View",
    )
