"""Shared fakes for executor, router and dispatcher tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from trakt_actions.ports.outbound import RemoteResponse

STRUCTURED_CALLS = (
    "checkin_episode",
    "checkin_movie",
    "rate_episode",
    "rate_show",
    "comment_show",
    "comment_episode",
)
WATCHLIST_CALLS = ("watchlist_movie", "unwatchlist_movie")


class FakeEnvironment:
    def __init__(self, client=None, reachable=True, credentials=True, acquire_error=None):
        self.client = client
        self.reachable = reachable
        self.credentials = credentials
        self.acquire_error = acquire_error
        self.acquire_calls = 0

    async def is_network_reachable(self):
        return self.reachable

    async def has_valid_credentials(self):
        return self.credentials

    async def acquire_authenticated_client(self):
        self.acquire_calls += 1
        if self.acquire_error is not None:
            raise self.acquire_error
        return self.client


class RecordingObserver:
    def __init__(self):
        self.completed = []
        self.blocked = []

    def on_action_complete(self, request, success):
        self.completed.append((request, success))

    def on_checkin_blocked(self, request, wait_seconds):
        self.blocked.append((request, wait_seconds))


def _make_client(response=None):
    client = MagicMock()
    for name in STRUCTURED_CALLS:
        setattr(
            client,
            name,
            AsyncMock(return_value=response or RemoteResponse(status="success", message="ok")),
        )
    for name in WATCHLIST_CALLS:
        setattr(client, name, AsyncMock(return_value=None))
    return client


@pytest.fixture
def make_client():
    return _make_client


@pytest.fixture
def remote_client():
    return _make_client()


@pytest.fixture
def make_env():
    return FakeEnvironment


@pytest.fixture
def env(remote_client):
    return FakeEnvironment(client=remote_client)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def make_observer():
    return RecordingObserver


def remote_calls(client):
    """Names of the remote methods that were awaited."""
    return [
        name
        for name in STRUCTURED_CALLS + WATCHLIST_CALLS
        if getattr(client, name).await_count
    ]


@pytest.fixture
def awaited():
    return remote_calls
