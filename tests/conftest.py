"""Shared fixtures and test doubles (no test touches the network)"""

import pytest
import requests

from cultura.chatbot import ChatKnowledgeResolver
from cultura.offline_translation import OfflineTranslator
from cultura.store import KnowledgeStore


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session: records calls, replays scripted outcomes"""

    def __init__(self, outcomes=()):
        self.outcomes = list(outcomes)
        self.calls = []
        self.headers = {}

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0) if self.outcomes else FakeResponse(500)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)


def make_record(**overrides):
    """Minimal valid raw entity record"""
    record = {
        "id": "test-fest",
        "name": "Test Festival",
        "type": "festival",
        "region": "Test Valley",
        "state": "Assam",
        "season": "winter",
        "communities": ["Test Community"],
        "rituals": ["Lighting lamps"],
        "symbols": ["Drum"],
        "description": "A festival used in tests.",
        "historicalContext": "Invented for the test suite.",
        "attribution": "Test Community elders",
        "language": "Assamese",
    }
    record.update(overrides)
    return record


@pytest.fixture(scope="session")
def store():
    return KnowledgeStore()


@pytest.fixture
def resolver(store):
    return ChatKnowledgeResolver(store)


@pytest.fixture
def offline():
    return OfflineTranslator(use_public_lookup=False)


@pytest.fixture
def clock():
    return FakeClock(1000.0)
