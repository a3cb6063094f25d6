"""trakt client using aiohttp."""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from trakt_actions.domain.models import Rating
from trakt_actions.ports.outbound import STATUS_FAILURE, RemoteResponse

TRAKT_API_BASE = "https://api.trakt.tv"


class TraktError(Exception):
    """Base of every error raised by TraktClient"""
    pass


class TraktTransportError(TraktError):
    """Connection failure or timeout"""
    pass


class TraktProtocolError(TraktError):
    """Response body was not the expected JSON object"""
    pass


class TraktServiceError(TraktError):
    """trakt answered with a failure status where none was expected"""
    pass


def _title(data: Dict[str, Any], key: str) -> Optional[str]:
    item = data.get(key)
    if isinstance(item, dict):
        return item.get("title")
    return None


def parse_response(data: Any) -> RemoteResponse:
    if not isinstance(data, dict):
        raise TraktProtocolError(f"unexpected response: {str(data)[:200]}")
    try:
        wait = int(data.get("wait") or 0)
    except (TypeError, ValueError):
        wait = 0
    return RemoteResponse(
        status=str(data.get("status") or STATUS_FAILURE),
        message=data.get("message"),
        error=data.get("error"),
        wait=wait,
        show_title=_title(data, "show"),
        movie_title=_title(data, "movie"),
    )


class TraktClient:
    """Async client for the trakt v1 write API (credentials travel in the body)."""

    def __init__(
        self,
        api_key: str,
        username: str,
        password_sha1: str,
        api_base: str = TRAKT_API_BASE,
        timeout: float = 15.0,
    ):
        self.api_key = api_key
        self.username = username
        self.password_sha1 = password_sha1
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.api_base}/{path}/{self.api_key}"

    async def _post(self, path: str, payload: Dict[str, Any]) -> RemoteResponse:
        body = {"username": self.username, "password": self.password_sha1, **payload}
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self._url(path), json=body) as resp:
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError:
                        raise TraktProtocolError(f"{path}: non-JSON response (HTTP {resp.status})")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TraktTransportError(f"{path}: {e or type(e).__name__}") from e
        return parse_response(data)

    async def checkin_episode(
        self, show_id: int, season: int, episode: int, message: Optional[str] = None
    ) -> RemoteResponse:
        payload = {"tvdb_id": show_id, "season": season, "episode": episode}
        if message:
            payload["message"] = message
        return await self._post("show/checkin", payload)

    async def checkin_movie(self, imdb_id: str, message: Optional[str] = None) -> RemoteResponse:
        payload = {"imdb_id": imdb_id}
        if message:
            payload["message"] = message
        return await self._post("movie/checkin", payload)

    async def rate_episode(
        self, show_id: int, season: int, episode: int, rating: Rating
    ) -> RemoteResponse:
        return await self._post(
            "rate/episode",
            {"tvdb_id": show_id, "season": season, "episode": episode, "rating": rating.value},
        )

    async def rate_show(self, show_id: int, rating: Rating) -> RemoteResponse:
        return await self._post("rate/show", {"tvdb_id": show_id, "rating": rating.value})

    async def comment_show(self, show_id: int, comment: str, spoiler: bool = False) -> RemoteResponse:
        return await self._post(
            "comment/show",
            {"tvdb_id": show_id, "comment": comment, "spoiler": spoiler},
        )

    async def comment_episode(
        self, show_id: int, season: int, episode: int, comment: str, spoiler: bool = False
    ) -> RemoteResponse:
        return await self._post(
            "comment/episode",
            {
                "tvdb_id": show_id,
                "season": season,
                "episode": episode,
                "comment": comment,
                "spoiler": spoiler,
            },
        )

    async def _movie_list(self, path: str, tmdb_id: int) -> None:
        response = await self._post(path, {"movies": [{"tmdb_id": tmdb_id}]})
        if not response.is_success:
            raise TraktServiceError(response.error or f"{path} failed")

    async def watchlist_movie(self, tmdb_id: int) -> None:
        await self._movie_list("movie/watchlist", tmdb_id)

    async def unwatchlist_movie(self, tmdb_id: int) -> None:
        await self._movie_list("movie/unwatchlist", tmdb_id)
