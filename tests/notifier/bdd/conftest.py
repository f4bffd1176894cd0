"""Shared BDD fixtures and step definitions for notification dispatch."""

import pytest
from notifier.channel import create_channel
from notifier.channel.registry import ChannelRegistry
from notifier.content import Content
from notifier.dispatch import NotificationDispatcher
from notifier.exceptions import ValidationError
from notifier.preference import InMemoryPreferenceStore
from pytest_bdd import given, parsers, then, when


def _split(names):
    return [name.strip() for name in names.split(",") if name.strip()]


@pytest.fixture()
def world():
    """Mutable scenario state shared between steps."""
    return {
        "registry": None,
        "preferences": None,
        "dispatcher": None,
        "link": {},
        "outcomes": None,
        "error": None,
    }


def _notify(world, user_id, contact, build_content):
    world["outcomes"] = None
    world["error"] = None
    try:
        world["outcomes"] = world["dispatcher"].dispatch(user_id, contact, build_content())
    except ValidationError as exc:
        world["error"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the channels "{names}" are registered'))
def channels_registered(world, names):
    registry = ChannelRegistry(create_channel(name) for name in _split(names))
    preferences = InMemoryPreferenceStore(registry)
    world["registry"] = registry
    world["preferences"] = preferences
    world["dispatcher"] = NotificationDispatcher(registry, preferences, default_deadline=5)


@given(parsers.cfparse('user "{user_id}" prefers "{names}"'))
def user_prefers(world, user_id, names):
    world["preferences"].put(user_id, _split(names))


@given(parsers.cfparse('the "{name}" channel is failing with "{reason}"'))
def channel_failing(world, name, reason):
    world["registry"].resolve(name).configure(should_succeed=False, failure_reason=reason)


@given(parsers.cfparse('the notification links to "{url}" as "{label}"'))
def notification_links(world, url, label):
    world["link"] = {"action_url": url, "action_text": label}


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('user "{user_id}" is notified at "{contact}" with title "{title}" and body "{body}"'))
def user_notified(world, user_id, contact, title, body):
    _notify(world, user_id, contact, lambda: Content(title=title, plain_body=body, **world["link"]))


@when(parsers.cfparse('user "{user_id}" is notified at "{contact}" with an empty title'))
def user_notified_with_empty_title(world, user_id, contact):
    _notify(world, user_id, contact, lambda: Content(title="", plain_body="Body"))


@when(parsers.cfparse('the "{name}" channel is registered'))
def channel_registered_at_runtime(world, name):
    world["dispatcher"].register_channel(create_channel(name))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the outcomes are "{expected}"'))
def outcomes_are(world, expected):
    assert world["error"] is None
    actual = [f"{outcome.channel_name}={outcome.status.value}" for outcome in world["outcomes"]]
    assert actual == [pair.replace(" ", "") for pair in _split(expected)]


@then(parsers.cfparse('the "{name}" outcome detail is "{detail}"'))
def outcome_detail(world, name, detail):
    [outcome] = [outcome for outcome in world["outcomes"] if outcome.channel_name == name]
    assert outcome.detail == detail


def _last_email_html(world):
    return world["registry"].resolve("Email").sent_emails[-1]["html_body"]


@then(parsers.cfparse('the email HTML has the heading "{heading}"'))
def email_heading(world, heading):
    assert f"<h1>{heading}</h1>" in _last_email_html(world)


@then(parsers.cfparse('the email HTML has the paragraph "{paragraph}"'))
def email_paragraph(world, paragraph):
    assert f"<p>{paragraph}</p>" in _last_email_html(world)


@then(parsers.cfparse('the email HTML links to "{url}" labelled "{label}"'))
def email_link(world, url, label):
    assert f'<a href="{url}">{label}</a>' in _last_email_html(world)


@then(parsers.cfparse('the dispatch is rejected with code "{code}"'))
def dispatch_rejected(world, code):
    assert world["outcomes"] is None
    assert world["error"] is not None
    assert world["error"].code == code


@then("no channel has sent anything")
def nothing_sent(world):
    for name in world["registry"].list_names():
        channel = world["registry"].resolve(name)
        for records in ("sent_emails", "sent_messages", "sent_pushes"):
            assert getattr(channel, records, []) == []
