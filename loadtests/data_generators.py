"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the dispatcher's validation
rules (non-blank user id, contact and title) and match the field names
expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CHANNELS = ("Email", "SMS", "Push")


def unique_user_id() -> str:
    """Generate unique user IDs like 'user-lt-a1b2c3d4'."""
    return f"user-lt-{uuid.uuid4().hex[:8]}"


def contact_for(channel: str) -> str:
    """Generate a contact string that reads sensibly for the given channel."""
    if channel == "SMS":
        return f"+1{random.randint(200, 999)}{random.randint(200, 999)}{random.randint(1000, 9999)}"
    if channel == "Push":
        return f"device-{uuid.uuid4().hex}"
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}"


def content_data(with_action: bool | None = None, long_body: bool = False) -> dict:
    """Generate a ContentRequest payload.

    ``long_body`` produces a body past the SMS and push limits so the
    truncation paths are exercised under load.
    """
    if with_action is None:
        with_action = random.random() < 0.5
    body = fake.paragraph(nb_sentences=12) if long_body else fake.sentence(nb_words=12)
    content = {
        "title": fake.catch_phrase()[:80],
        "plain_body": body,
    }
    if with_action:
        content["action_url"] = fake.url()
        content["action_text"] = random.choice(["View", "Open", "Track order"])
    return content


def dispatch_data(user_id: str | None = None, channel: str | None = None, **content_kwargs) -> dict:
    """Generate a DispatchRequest payload."""
    channel = channel or random.choice(CHANNELS)
    return {
        "user_id": user_id or unique_user_id(),
        "contact": contact_for(channel),
        "content": content_data(**content_kwargs),
    }


def preference_data(min_channels: int = 1) -> dict:
    """Generate an UpdatePreferencesRequest payload with a random channel subset."""
    count = random.randint(min_channels, len(CHANNELS))
    return {"channels": random.sample(CHANNELS, count)}


def invalid_dispatch_data() -> dict:
    """Generate a payload the dispatcher rejects with a 400."""
    payload = dispatch_data()
    broken = random.choice(["title", "contact", "user_id"])
    if broken == "title":
        payload["content"]["title"] = "   "
    else:
        payload[broken] = ""
    return payload
