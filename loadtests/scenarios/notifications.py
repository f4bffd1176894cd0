"""Notification dispatch load test scenarios.

RecipientJourney walks one recipient through preference changes and
dispatches in order. DispatchFloodUser fires independent dispatches as fast
as the pacing allows, to saturate the per-request send workers.
"""

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import (
    dispatch_data,
    invalid_dispatch_data,
    preference_data,
    unique_user_id,
)
from loadtests.helpers.response import extract_error_detail, failed_channels
from loadtests.helpers.state import RecipientState


class RecipientJourney(SequentialTaskSet):
    """Read defaults -> Set preferences -> Dispatch (x2) -> Clear preferences."""

    def on_start(self):
        self.state = RecipientState(user_id=unique_user_id())

    @task
    def read_default_preferences(self):
        with self.client.get(
            f"/notifications/preferences/{self.state.user_id}",
            catch_response=True,
            name="GET /notifications/preferences/{user_id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Read preferences failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()
            elif resp.json().get("is_default") is not True:
                resp.failure("Fresh recipient should see the default channel list")

    @task
    def set_preferences(self):
        payload = preference_data()
        with self.client.put(
            f"/notifications/preferences/{self.state.user_id}",
            json=payload,
            catch_response=True,
            name="PUT /notifications/preferences/{user_id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.channels = payload["channels"]
            else:
                resp.failure(f"Set preferences failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def dispatch_plain(self):
        self._dispatch(with_action=False)

    @task
    def dispatch_with_action(self):
        self._dispatch(with_action=True, long_body=True)

    @task
    def clear_preferences(self):
        with self.client.delete(
            f"/notifications/preferences/{self.state.user_id}",
            catch_response=True,
            name="DELETE /notifications/preferences/{user_id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Clear preferences failed: {resp.status_code} {extract_error_detail(resp)}")
        self.interrupt()

    def _dispatch(self, **content_kwargs):
        payload = dispatch_data(user_id=self.state.user_id, **content_kwargs)
        with self.client.post(
            "/notifications",
            json=payload,
            catch_response=True,
            name="POST /notifications",
        ) as resp:
            if resp.status_code != 202:
                resp.failure(f"Dispatch failed: {resp.status_code} {extract_error_detail(resp)}")
                return
            outcomes = resp.json()
            self.state.dispatch_count += 1
            if [item["channel"] for item in outcomes] != self.state.channels:
                resp.failure(f"Outcomes do not follow preferences {self.state.channels}: {outcomes}")
            failed = failed_channels(resp)
            if failed:
                self.state.failed_outcomes += len(failed)
                resp.failure(f"Channels not sent: {', '.join(failed)}")


class NotificationUser(HttpUser):
    """Realistic mix of recipient journeys, channel listing and bad requests.

    Bad requests are expected to come back as 400 and are counted as
    successes when they do.
    """

    wait_time = between(0.5, 2.0)
    tasks = {RecipientJourney: 8}

    @task(2)
    def list_channels(self):
        self.client.get("/notifications/channels", name="GET /notifications/channels")

    @task(1)
    def rejected_dispatch(self):
        with self.client.post(
            "/notifications",
            json=invalid_dispatch_data(),
            catch_response=True,
            name="POST /notifications [invalid]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")


class DispatchFloodUser(HttpUser):
    """Stress test: maximum dispatch throughput.

    Every request targets a new recipient, so all default channels are
    attempted and no preference state is shared between requests.
    """

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    @task
    def dispatch(self):
        self.client.post(
            "/notifications",
            json=dispatch_data(),
            name="[STRESS] POST /notifications",
        )
