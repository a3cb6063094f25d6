"""Unit tests for action routes."""

import pytest
from unittest.mock import patch
from httpx import AsyncClient, ASGITransport

from trakt_actions.adapters.web import action_routes
from trakt_actions.adapters.web.server import app
from trakt_actions.dispatcher import ActionDispatcher
from trakt_actions.domain.models import CheckinEpisode, WatchlistAddMovie
from trakt_actions.domain.outcome import SoftFailure
from trakt_actions.ports.inbound import ActionCompleteEvent
from trakt_actions.ports.outbound import RemoteResponse
from trakt_actions.router import OutcomeRouter


@pytest.fixture
def transport():
    return ASGITransport(app=app)


@pytest.fixture
def use_env():
    """Swap the module-level dispatcher for one bound to a fake environment."""
    patches = []

    def _use(env):
        p = patch.object(action_routes, "dispatcher", ActionDispatcher(env, OutcomeRouter()))
        p.start()
        patches.append(p)

    yield _use
    for p in patches:
        p.stop()


class TestSubmitAction:
    @pytest.mark.asyncio
    async def test_checkin_success(self, transport, use_env, env):
        use_env(env)
        body = {"traktaction": "checkin_episode", "tvdbid": 42, "season": 1, "episode": 3, "message": "watching!"}
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json=body)
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert "1x3" in data["message"]

    @pytest.mark.asyncio
    async def test_watchlist(self, transport, use_env, env, remote_client):
        use_env(env)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json={"traktaction": "watchlist_add_movie", "tmdbid": 100})
        assert resp.json() == {"status": "success", "message": "added to watchlist", "error": None, "wait_seconds": None}
        remote_client.watchlist_movie.assert_awaited_once_with(100)

    @pytest.mark.asyncio
    async def test_blocked(self, transport, use_env, make_env, make_client):
        use_env(make_env(client=make_client(RemoteResponse(status="failure", wait=30))))
        body = {"traktaction": "checkin_movie", "imdbid": "tt1"}
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json=body)
        assert resp.json()["status"] == "blocked"
        assert resp.json()["wait_seconds"] == 30

    @pytest.mark.asyncio
    async def test_offline(self, transport, use_env, make_env):
        use_env(make_env(reachable=False))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json={"traktaction": "rate_show", "tvdbid": 1, "rating": 7})
        assert resp.json()["status"] == "failure"
        assert resp.json()["error"] == "offline"

    @pytest.mark.asyncio
    async def test_auth_required(self, transport, use_env, make_env):
        use_env(make_env(credentials=False))
        body = {"traktaction": "shout", "tvdbid": 1, "episode": 0, "message": "hi"}
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json=body)
        assert resp.json()["status"] == "auth_required"
        assert resp.json()["error"] is None

    @pytest.mark.asyncio
    async def test_invalid_request(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json={"traktaction": "checkin_episode", "tvdbid": 42})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_kind(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/actions", json={"traktaction": "scrobble"})
        assert resp.status_code == 422


class TestListing:
    @pytest.mark.asyncio
    async def test_kinds(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/actions/kinds")
        assert resp.status_code == 200
        assert "checkin_episode" in resp.json()
        assert len(resp.json()) == 8

    @pytest.mark.asyncio
    async def test_recent_newest_first(self, transport, monkeypatch):
        from collections import deque

        events = deque(
            [
                ActionCompleteEvent(WatchlistAddMovie(tmdb_id=1), True),
                ActionCompleteEvent(CheckinEpisode(show_id=2, season=1, episode=1), False),
            ]
        )
        monkeypatch.setattr(action_routes, "recent_events", events)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/actions/recent")
        data = resp.json()
        assert data[0] == {
            "request": {"traktaction": "checkin_episode", "tvdbid": 2, "season": 1, "episode": 1},
            "success": False,
        }
        assert data[1]["request"]["tmdbid"] == 1


class TestOutcomeToResponse:
    def test_blocked(self):
        r = action_routes.outcome_to_response(SoftFailure(12))
        assert (r.status, r.wait_seconds) == ("blocked", 12)

    def test_abandoned(self):
        assert action_routes.outcome_to_response(None).status == "abandoned"
