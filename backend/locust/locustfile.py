"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags concurrency  # Concurrent seat changes
  locust -f locustfile.py --tags throughput   # Cached reads
  locust -f locustfile.py --tags edge         # Bad input
  locust -f locustfile.py                     # All tests
"""

import random
from datetime import datetime, timezone, timedelta

from locust import HttpUser, task, between, tag, events

# Shared state
WEBINAR_IDS = []
CONTENDED_WEBINAR_ID = None


def future_window(min_days: int = 4, max_days: int = 60) -> dict:
    start = datetime.now(timezone.utc) + timedelta(days=random.randint(min_days, max_days))
    return {
        "startDate": start.isoformat(),
        "endDate": (start + timedelta(hours=1)).isoformat(),
    }


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "=" * 60)
    print("SETUP: webinars are created on first user start")
    print("=" * 60)


class SeatContentionUser(HttpUser):
    """
    TEST 1: Concurrency - every user raises the seats of the same webinar

    Run: locust -f locustfile.py --tags concurrency -u 100 -r 50 --run-time 30s

    Conflicting writes must surface as 409 instead of silently losing updates.
    After the run the stored seat count equals the highest accepted request.
    """
    wait_time = between(0, 0.1)

    def on_start(self):
        if not CONTENDED_WEBINAR_ID:
            resp = self.client.post("/webinars", json={
                "title": "Contended webinar",
                "seats": 1,
                **future_window(),
            })
            if resp.status_code == 201:
                globals()["CONTENDED_WEBINAR_ID"] = resp.json()["id"]
                print(f"\nCreated webinar {CONTENDED_WEBINAR_ID} with 1 seat\n")

    @tag("concurrency")
    @task
    def raise_seats(self):
        if not CONTENDED_WEBINAR_ID:
            return

        with self.client.post(
            f"/webinars/{CONTENDED_WEBINAR_ID}/seats",
            json={"seats": random.randint(1, 1000)},
            name="/webinars/{id}/seats",
            catch_response=True,
        ) as resp:
            # 400: lower than the current value, 409: lost the race
            if resp.status_code in [200, 400, 409]:
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code}")


class ThroughputUser(HttpUser):
    """
    TEST 2: Throughput - cache effectiveness on GET /webinars/{id}

    Run with and without Redis and compare P95/P99 latency.
    """
    wait_time = between(0.1, 0.5)

    def on_start(self):
        if len(WEBINAR_IDS) < 20:
            resp = self.client.post("/webinars", json={
                "title": f"Webinar {random.randint(1, 10000)}",
                "seats": random.randint(10, 500),
                **future_window(),
            })
            if resp.status_code == 201:
                WEBINAR_IDS.append(resp.json()["id"])

    @tag("throughput", "read")
    @task(10)
    def get_webinar(self):
        if WEBINAR_IDS:
            self.client.get(f"/webinars/{random.choice(WEBINAR_IDS)}", name="/webinars/{id}")

    @tag("throughput")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - every bad request gets a 4xx, never a 500

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s
    """
    wait_time = between(0.5, 1.5)

    def _expect(self, resp, allowed):
        if resp.status_code in allowed:
            resp.success()
        else:
            resp.failure(f"Expected {allowed}, got {resp.status_code}")

    @tag("edge")
    @task
    def too_soon(self):
        with self.client.post("/webinars", json={
            "title": "Tomorrow",
            "seats": 10,
            **future_window(min_days=0, max_days=2),
        }, catch_response=True) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def zero_seats(self):
        with self.client.post("/webinars", json={
            "title": "Empty",
            "seats": 0,
            **future_window(),
        }, catch_response=True) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def huge_seats(self):
        with self.client.post("/webinars", json={
            "title": "Stadium",
            "seats": 999999,
            **future_window(),
        }, catch_response=True) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def unknown_webinar(self):
        with self.client.post("/webinars/does-not-exist/seats", json={"seats": 10},
                              name="/webinars/{id}/seats", catch_response=True) as resp:
            self._expect(resp, [404])

    @tag("edge")
    @task
    def malformed_json(self):
        with self.client.post("/webinars", data="not json at all", catch_response=True) as resp:
            self._expect(resp, [400, 422])
