"""
Module: conftest.py
Description: Shared pytest fixtures for ironqueue tests.

Provides an in-memory transport emulating the queue service's wire
contract, httpx MockTransport backed HTTP transports, sample messages
and test settings.
"""

import json
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, unquote, urlsplit

import httpx
import pytest
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ironqueue.client import Client
from ironqueue.config.clouds import IRON_AWS_US_EAST
from ironqueue.config.settings import Settings
from ironqueue.errors import HTTPError
from ironqueue.models.message import Message, new_message
from ironqueue.queues.queue import Queue
from ironqueue.transport.http import HttpTransport


class TestSettings(Settings):
    """Test settings that don't read the environment or a .env file."""

    __test__ = False

    model_config = SettingsConfigDict(
        env_prefix="IRON_TEST_UNUSED_",
        env_file=None,
        case_sensitive=False,
        extra="ignore"
    )

    project_id: str = Field(default="test-project")
    token: str = Field(default="test-token")
    log_level: str = Field(default="DEBUG")


class FakeTransport:
    """
    In-memory stand-in for the queue service.

    Messages stay visible until deleted, so a get() is a peek. Every
    request is recorded as (method, path, body).
    """

    def __init__(self):
        self.queues: Dict[str, List[dict]] = {}
        self.requests: List[Tuple[str, str, Optional[str]]] = []
        self.fail_with: Optional[HTTPError] = None
        self.next_body: Optional[str] = None
        self._counter = 0

    def get(self, path: str) -> str:
        self._record("GET", path)
        if self.next_body is not None:
            return self._take_next_body()

        url = urlsplit(path)
        name = self._queue_name(url.path)
        limit = int(parse_qs(url.query)["n"][0])
        return json.dumps({"messages": self.queues.get(name, [])[:limit]})

    def post(self, path: str, body: Optional[str] = None) -> str:
        self._record("POST", path, body)
        if self.next_body is not None:
            return self._take_next_body()

        name = self._queue_name(path)
        if path.endswith("/clear"):
            self.queues[name] = []
            return json.dumps({"msg": "Cleared"})

        ids = []
        for wire in json.loads(body)["messages"]:
            self._counter += 1
            message_id = f"msg-{self._counter}"
            self.queues.setdefault(name, []).append({"id": message_id, **wire})
            ids.append(message_id)
        return json.dumps({"ids": ids, "msg": "Messages put on queue."})

    def delete(self, path: str) -> str:
        self._record("DELETE", path)
        name = self._queue_name(path)
        message_id = unquote(path.rsplit("/", 1)[1])
        remaining = [m for m in self.queues.get(name, []) if m["id"] != message_id]
        if len(remaining) == len(self.queues.get(name, [])):
            raise HTTPError(404, json.dumps({"msg": "Message not found"}))
        self.queues[name] = remaining
        return json.dumps({"msg": "Deleted"})

    def _record(self, method: str, path: str, body: Optional[str] = None) -> None:
        self.requests.append((method, path, body))
        if self.fail_with is not None:
            raise self.fail_with

    def _take_next_body(self) -> str:
        body, self.next_body = self.next_body, None
        return body

    @staticmethod
    def _queue_name(path: str) -> str:
        return unquote(path.split("/")[1])


@pytest.fixture
def test_settings():
    """Provide configuration that ignores the environment."""
    return TestSettings()


@pytest.fixture
def fake_transport():
    """Provide an empty in-memory queue service."""
    return FakeTransport()


@pytest.fixture
def queue(fake_transport):
    """Provide a queue handle backed by the in-memory service."""
    return Queue("test-queue", fake_transport)


@pytest.fixture
def client(fake_transport):
    """Provide a client whose queues use the in-memory service."""
    return Client("test-project", "test-token", transport=fake_transport)


@pytest.fixture
def sample_messages():
    """Provide messages ready to push."""
    return [
        new_message("first"),
        new_message("second", timeout=60),
        new_message("third", timeout=30, delay=5, expires_in=3600),
    ]


@pytest.fixture
def sample_message():
    """Provide a message as returned by the service."""
    return Message(id="5924620498196814694", body="hello", timeout=60)


@pytest.fixture
def mock_http():
    """
    Build an HttpTransport whose requests go to a handler function.

    Returns a factory taking the handler and returning (transport, sent)
    where sent collects every httpx.Request issued.
    """
    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        sent: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        transport = HttpTransport(
            "test-project",
            "test-token",
            IRON_AWS_US_EAST,
            client=httpx.Client(transport=httpx.MockTransport(recording_handler))
        )
        return transport, sent

    return factory
