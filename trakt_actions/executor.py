"""Runs one action request against trakt and normalizes the result."""

import logging
from typing import Callable, Optional

from trakt_actions.config import CONFIG
from trakt_actions.domain.formatting import checkin_message, format_episode_number
from trakt_actions.domain.models import (
    ActionRequest,
    CheckinEpisode,
    CheckinMovie,
    PostEpisodeComment,
    PostShowComment,
    RateEpisode,
    RateShow,
    WatchlistAddMovie,
    WatchlistRemoveMovie,
)
from trakt_actions.domain.outcome import (
    GENERIC_CLIENT_ERROR,
    OFFLINE_ERROR,
    AuthRequired,
    HardFailure,
    Outcome,
    SoftFailure,
    Success,
)
from trakt_actions.ports.outbound import Environment, RemoteClient, RemoteResponse

log = logging.getLogger(__name__)

WATCHLIST_ADDED = "added to watchlist"
WATCHLIST_REMOVED = "removed from watchlist"
RATED = "rated"
COMMENT_POSTED = "comment posted"


def _never_cancelled() -> bool:
    return False


def _blank_to_none(message: Optional[str]) -> Optional[str]:
    if message is None or not message.strip():
        return None
    return message


class ActionExecutor:
    """Precondition gate, remote dispatch and result normalization.

    Holds no per-request state; one instance may serve any number of
    concurrent requests.
    """

    def __init__(self, episode_number_format: Optional[str] = None):
        self.episode_number_format = episode_number_format or CONFIG["episode_number_format"]

    async def execute(
        self,
        request: ActionRequest,
        env: Environment,
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> Optional[Outcome]:
        """Run ``request``. Returns None only if it was abandoned before any remote call."""
        is_cancelled = is_cancelled or _never_cancelled
        if is_cancelled():
            return None

        if not await env.is_network_reachable():
            return HardFailure(OFFLINE_ERROR)

        if not await env.has_valid_credentials():
            return AuthRequired()

        try:
            client = await env.acquire_authenticated_client()
        except Exception as e:
            log.warning("could not acquire trakt client: %s", e)
            client = None
        if client is None:
            return HardFailure(GENERIC_CLIENT_ERROR)

        # last chance to abort
        if is_cancelled():
            log.debug("abandoned %s before remote call", type(request).__name__)
            return None

        try:
            return await self._dispatch(request, client)
        except Exception as e:
            log.error("%s failed: %s", type(request).__name__, e, exc_info=True)
            return HardFailure(GENERIC_CLIENT_ERROR)

    async def _dispatch(self, request: ActionRequest, client: RemoteClient) -> Outcome:
        if isinstance(request, CheckinEpisode):
            response = await client.checkin_episode(
                request.show_id,
                request.season,
                request.episode,
                message=_blank_to_none(request.message),
            )
            number = format_episode_number(
                request.season, request.episode, self.episode_number_format
            )
            return self._normalize(response, checkin_message(response.show_title, number))

        if isinstance(request, CheckinMovie):
            response = await client.checkin_movie(
                request.imdb_id, message=_blank_to_none(request.message)
            )
            title = response.movie_title or request.imdb_id
            return self._normalize(response, checkin_message(title))

        if isinstance(request, RateEpisode):
            response = await client.rate_episode(
                request.show_id, request.season, request.episode, request.rating
            )
            return self._normalize(response, response.message or RATED)

        if isinstance(request, RateShow):
            response = await client.rate_show(request.show_id, request.rating)
            return self._normalize(response, response.message or RATED)

        if isinstance(request, PostShowComment):
            response = await client.comment_show(
                request.show_id, request.message, spoiler=request.is_spoiler
            )
            return self._normalize(response, response.message or COMMENT_POSTED)

        if isinstance(request, PostEpisodeComment):
            response = await client.comment_episode(
                request.show_id,
                request.season,
                request.episode,
                request.message,
                spoiler=request.is_spoiler,
            )
            return self._normalize(response, response.message or COMMENT_POSTED)

        # Watchlist calls only report failure by raising
        if isinstance(request, WatchlistAddMovie):
            await client.watchlist_movie(request.tmdb_id)
            return Success(WATCHLIST_ADDED)

        if isinstance(request, WatchlistRemoveMovie):
            await client.unwatchlist_movie(request.tmdb_id)
            return Success(WATCHLIST_REMOVED)

        raise ValueError(f"unsupported action request: {request!r}")

    @staticmethod
    def _normalize(response: RemoteResponse, success_message: str) -> Outcome:
        if response.is_success:
            return Success(success_message)
        if response.wait:
            # a check-in is already in progress
            return SoftFailure(int(response.wait))
        return HardFailure(response.error or GENERIC_CLIENT_ERROR)
