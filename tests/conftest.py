"""
Shared fixtures: in-memory stand-ins for the record store and the mail
notifier that record every call in a common log, so tests can check both
call counts and call order.
"""

from __future__ import annotations

import itertools

import pytest

from contact_api.core.submission_handler import SubmissionHandler
from contact_api.models.contact import ContactRequest, PersistedSubmission

MAILBOX = "site@example.com"


class FakeStore:
    def __init__(self, calls, error=None, ids=None):
        self.calls = calls
        self.error = error
        self.ids = ids or (f"id{n}" for n in itertools.count(1))
        self.created = []

    async def create(self, submission):
        self.calls.append("create")
        if self.error is not None:
            raise self.error
        saved = PersistedSubmission(id=next(self.ids), **submission.model_dump())
        self.created.append(saved)
        return saved


class FakeNotifier:
    def __init__(self, calls, error=None):
        self.calls = calls
        self.error = error
        self.sent = []

    async def send(self, email):
        self.calls.append("send")
        if self.error is not None:
            raise self.error
        self.sent.append(email)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def store(calls):
    return FakeStore(calls)


@pytest.fixture
def notifier(calls):
    return FakeNotifier(calls)


@pytest.fixture
def handler(store, notifier):
    return SubmissionHandler(store=store, notifier=notifier, mailbox=MAILBOX)


@pytest.fixture
def valid_request():
    return ContactRequest(name="Ann", email="ann@x.com", subject="Hi", message="Hello")
