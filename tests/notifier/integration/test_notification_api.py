"""Integration tests for the notifications API endpoints."""

import pytest
from fastapi.testclient import TestClient
from notifier.app import create_app
from notifier.bootstrap import build_container
from notifier.config import Settings


@pytest.fixture()
def container():
    return build_container(Settings(dispatch_timeout_seconds=5))


@pytest.fixture()
def client(container):
    return TestClient(create_app(container=container))


def _payload(**overrides):
    payload = {
        "user_id": "user-api-1",
        "contact": "jane@example.com",
        "content": {
            "title": "Order Confirmed",
            "plain_body": "Total: $42",
            "action_url": "https://x/o/1",
            "action_text": "View",
        },
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------
# Dispatch endpoint
# ---------------------------------------------------------------
class TestDispatchAPI:
    def test_dispatch_returns_202_with_outcomes(self, client, container):
        resp = client.post("/notifications", json=_payload())
        assert resp.status_code == 202
        data = resp.json()
        assert [item["channel"] for item in data] == ["Email", "SMS", "Push"]
        assert {item["status"] for item in data} == {"Sent"}

        email = container.registry.resolve("Email")
        assert "<h1>Order Confirmed</h1>" in email.sent_emails[0]["html_body"]

    def test_skipped_channel_has_no_detail(self, client, container):
        container.preferences.put("user-api-1", ["Email", "Pigeon"])
        resp = client.post("/notifications", json=_payload())
        assert resp.status_code == 202
        assert resp.json()[1] == {"channel": "Pigeon", "status": "SkippedUnavailable"}

    def test_failed_channel_reports_detail(self, client, container):
        container.registry.resolve("Push").configure(should_succeed=False, failure_reason="Token expired")
        container.preferences.put("user-api-1", ["Push"])
        resp = client.post("/notifications", json=_payload())
        assert resp.status_code == 202
        assert resp.json() == [{"channel": "Push", "status": "Failed", "detail": "Token expired"}]

    def test_deadline_seconds_applied(self, client, container):
        container.registry.resolve("Push").configure(delay_seconds=1.0)
        container.preferences.put("user-api-1", ["Push"])
        resp = client.post("/notifications", json=_payload(deadline_seconds=0.1))
        assert resp.json() == [{"channel": "Push", "status": "Failed", "detail": "timeout"}]

    def test_empty_title_returns_400_with_reason(self, client, container):
        payload = _payload()
        payload["content"]["title"] = ""
        resp = client.post("/notifications", json=payload)
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "invalid_content"
        assert "title" in body["error"]
        assert container.registry.resolve("Email").sent_emails == []

    def test_blank_contact_returns_400(self, client):
        resp = client.post("/notifications", json=_payload(contact="  "))
        assert resp.status_code == 400
        assert resp.json()["code"] == "missing_contact"

    def test_blank_user_id_returns_400(self, client):
        resp = client.post("/notifications", json=_payload(user_id=""))
        assert resp.status_code == 400
        assert resp.json()["code"] == "missing_user_id"

    def test_missing_content_returns_400(self, client):
        payload = _payload()
        del payload["content"]
        resp = client.post("/notifications", json=payload)
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "malformed_request"
        assert "content" in body["error"]

    def test_non_positive_deadline_returns_400(self, client):
        resp = client.post("/notifications", json=_payload(deadline_seconds=0))
        assert resp.status_code == 400
        assert resp.json()["code"] == "invalid_deadline"

    def test_oversized_deadline_returns_400(self, client, container):
        resp = client.post("/notifications", json=_payload(deadline_seconds=1e10))
        assert resp.status_code == 400
        assert resp.json()["code"] == "invalid_deadline"
        assert container.registry.resolve("Email").sent_emails == []


# ---------------------------------------------------------------
# Channels and preferences
# ---------------------------------------------------------------
class TestChannelsAPI:
    def test_list_channels(self, client):
        resp = client.get("/notifications/channels")
        assert resp.status_code == 200
        assert resp.json() == {"channels": ["Email", "SMS", "Push"]}

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "channels": ["Email", "SMS", "Push"]}


class TestPreferencesAPI:
    def test_get_preferences_returns_defaults(self, client):
        resp = client.get("/notifications/preferences/user-new")
        assert resp.status_code == 200
        assert resp.json() == {
            "user_id": "user-new",
            "channels": ["Email", "SMS", "Push"],
            "is_default": True,
        }

    def test_put_then_get(self, client):
        resp = client.put("/notifications/preferences/user-1", json={"channels": ["Push", "Email"]})
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

        data = client.get("/notifications/preferences/user-1").json()
        assert data["channels"] == ["Push", "Email"]
        assert data["is_default"] is False

    def test_put_blank_channel_returns_400(self, client):
        resp = client.put("/notifications/preferences/user-1", json={"channels": ["Email", ""]})
        assert resp.status_code == 400
        assert resp.json()["code"] == "invalid_preferences"

    def test_delete_restores_defaults(self, client):
        client.put("/notifications/preferences/user-1", json={"channels": ["SMS"]})
        resp = client.delete("/notifications/preferences/user-1")
        assert resp.status_code == 200
        assert client.get("/notifications/preferences/user-1").json()["is_default"] is True

    def test_preferences_drive_dispatch(self, client, container):
        client.put("/notifications/preferences/user-api-1", json={"channels": ["SMS"]})
        resp = client.post("/notifications", json=_payload(contact="+15551234567"))
        assert [item["channel"] for item in resp.json()] == ["SMS"]
        assert container.registry.resolve("SMS").sent_messages[0]["to"] == "+15551234567"
