"""
HTTP tests for the contact API. The app is used without running its
lifespan, and the submission handler is swapped for one built on fakes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from contact_api.api.dependencies import get_submission_handler
from contact_api.core.submission_handler import SubmissionHandler
from contact_api.main import app, settings

from tests.conftest import MAILBOX, FakeNotifier, FakeStore

VALID = {"name": "Ann", "email": "ann@x.com", "subject": "Hi", "message": "Hello"}


@pytest.fixture
def client_for():
    def _client(store, notifier):
        handler = SubmissionHandler(store=store, notifier=notifier, mailbox=MAILBOX)
        app.dependency_overrides[get_submission_handler] = lambda: handler
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_root_reports_backend_running():
    r = TestClient(app).get("/")
    assert r.status_code == 200
    assert r.text == "Backend is running"


def test_health_does_not_leak_values():
    r = TestClient(app).get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert set(data["env_vars"]) == {"mongodb_url", "email_user"}
    assert all(isinstance(v, bool) for v in data["env_vars"].values())


def test_contact_success(client_for, calls):
    client = client_for(FakeStore(calls), FakeNotifier(calls))

    r = client.post("/api/contact", json=VALID)

    assert r.status_code == 201
    assert r.json() == {"message": "Message saved and email sent successfully"}
    assert calls == ["create", "send"]


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
def test_contact_missing_field(client_for, calls, field):
    client = client_for(FakeStore(calls), FakeNotifier(calls))
    body = {k: v for k, v in VALID.items() if k != field}

    r = client.post("/api/contact", json=body)

    assert r.status_code == 400
    assert r.json() == {"message": "All fields are required"}
    assert calls == []


@pytest.mark.parametrize("body", [[], "text", {**VALID, "name": 42}])
def test_contact_malformed_body(client_for, calls, body):
    client = client_for(FakeStore(calls), FakeNotifier(calls))

    r = client.post("/api/contact", json=body)

    assert r.status_code == 400
    assert r.json() == {"message": "All fields are required"}
    assert calls == []


def test_contact_invalid_json(client_for, calls):
    client = client_for(FakeStore(calls), FakeNotifier(calls))

    r = client.post("/api/contact", content=b"{not json", headers={"Content-Type": "application/json"})

    assert r.status_code == 400
    assert calls == []


def test_contact_store_failure(client_for, calls):
    client = client_for(FakeStore(calls, error=RuntimeError("db down")), FakeNotifier(calls))

    r = client.post("/api/contact", json=VALID)

    assert r.status_code == 500
    assert r.json() == {"message": "Failed to save message to database", "error": "db down"}
    assert calls == ["create"]


def test_contact_email_failure_is_partial_success(client_for, calls):
    client = client_for(
        FakeStore(calls, ids=iter(["abc123"])),
        FakeNotifier(calls, error=RuntimeError("auth failed")),
    )

    r = client.post("/api/contact", json=VALID)

    assert r.status_code == 201
    assert r.json() == {
        "message": "Message saved to database, but failed to send email",
        "error": "auth failed",
        "savedData": {"id": "abc123", **VALID},
    }


def test_cors_allows_configured_origin(client_for, calls):
    client = client_for(FakeStore(calls), FakeNotifier(calls))
    origin = settings.allowed_origins[0]

    r = client.options(
        "/api/contact",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )

    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == origin
