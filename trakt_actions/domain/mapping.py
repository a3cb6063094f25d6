"""Flat key/value encoding of action requests.

Pure Python, no framework dependencies. The flat form crosses process
boundaries and HTTP bodies, so every request can be rebuilt from it
without loss.
"""

from __future__ import annotations

from typing import Any, Dict

from trakt_actions.domain.models import (
    ActionKind,
    ActionRequest,
    CheckinEpisode,
    CheckinMovie,
    InvalidActionRequest,
    PostEpisodeComment,
    PostShowComment,
    RateEpisode,
    RateShow,
    Rating,
    WatchlistAddMovie,
    WatchlistRemoveMovie,
)

# Mapping keys
KIND = "traktaction"
SHOW_ID = "tvdbid"
SEASON = "season"
EPISODE = "episode"
IMDB_ID = "imdbid"
TMDB_ID = "tmdbid"
MESSAGE = "message"
RATING = "rating"
IS_SPOILER = "isspoiler"

# Kind of the old combined comment action, split on the episode number
LEGACY_SHOUT = "shout"

# attribute name -> mapping key
_FIELD_KEYS: Dict[str, str] = {
    "show_id": SHOW_ID,
    "season": SEASON,
    "episode": EPISODE,
    "imdb_id": IMDB_ID,
    "tmdb_id": TMDB_ID,
    "message": MESSAGE,
    "rating": RATING,
    "is_spoiler": IS_SPOILER,
}


def request_to_mapping(request: ActionRequest) -> Dict[str, Any]:
    """Flatten a request into plain ints, strings and bools."""
    data: Dict[str, Any] = {KIND: request.kind.value}
    for attr, key in _FIELD_KEYS.items():
        if not hasattr(request, attr):
            continue
        value = getattr(request, attr)
        if value is None:
            continue
        if isinstance(value, Rating):
            value = str(value.value)
        data[key] = value
    return data


def _int(data: Dict[str, Any], key: str) -> int:
    if data.get(key) is None:
        raise InvalidActionRequest(f"missing {key!r}")
    value = data[key]
    if isinstance(value, bool):
        raise InvalidActionRequest(f"{key!r} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidActionRequest(f"{key!r} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidActionRequest(f"{key!r} must be an integer, got {value!r}")


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidActionRequest(f"missing {key!r}")
    return value


def _optional_text(data: Dict[str, Any], key: str):
    value = data.get(key)
    return value if isinstance(value, str) and value else None


def _bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _rating(data: Dict[str, Any]) -> Rating:
    if data.get(RATING) is None:
        raise InvalidActionRequest(f"missing {RATING!r}")
    try:
        return Rating.from_value(data[RATING])
    except ValueError as e:
        raise InvalidActionRequest(str(e))


def _parse_kind(raw: Any) -> ActionKind:
    if isinstance(raw, ActionKind):
        return raw
    try:
        return ActionKind(str(raw).strip().lower())
    except ValueError:
        raise InvalidActionRequest(f"unknown action kind: {raw!r}")


def request_from_mapping(data: Dict[str, Any]) -> ActionRequest:
    """Rebuild a request from its flat form. Unknown keys are ignored."""
    raw_kind = data.get(KIND)
    if raw_kind is None:
        raise InvalidActionRequest(f"missing {KIND!r}")

    if str(raw_kind).strip().lower() == LEGACY_SHOUT:
        episode = _int(data, EPISODE) if data.get(EPISODE) is not None else 0
        kind = (
            ActionKind.POST_EPISODE_COMMENT
            if episode != 0
            else ActionKind.POST_SHOW_COMMENT
        )
    else:
        kind = _parse_kind(raw_kind)

    if kind is ActionKind.CHECKIN_EPISODE:
        return CheckinEpisode(
            show_id=_int(data, SHOW_ID),
            season=_int(data, SEASON),
            episode=_int(data, EPISODE),
            message=_optional_text(data, MESSAGE),
        )
    if kind is ActionKind.CHECKIN_MOVIE:
        return CheckinMovie(
            imdb_id=_text(data, IMDB_ID),
            message=_optional_text(data, MESSAGE),
        )
    if kind is ActionKind.RATE_EPISODE:
        return RateEpisode(
            show_id=_int(data, SHOW_ID),
            season=_int(data, SEASON),
            episode=_int(data, EPISODE),
            rating=_rating(data),
        )
    if kind is ActionKind.RATE_SHOW:
        return RateShow(show_id=_int(data, SHOW_ID), rating=_rating(data))
    if kind is ActionKind.POST_SHOW_COMMENT:
        return PostShowComment(
            show_id=_int(data, SHOW_ID),
            message=_text(data, MESSAGE),
            is_spoiler=_bool(data, IS_SPOILER),
        )
    if kind is ActionKind.POST_EPISODE_COMMENT:
        return PostEpisodeComment(
            show_id=_int(data, SHOW_ID),
            season=_int(data, SEASON),
            episode=_int(data, EPISODE),
            message=_text(data, MESSAGE),
            is_spoiler=_bool(data, IS_SPOILER),
        )
    if kind is ActionKind.WATCHLIST_ADD_MOVIE:
        return WatchlistAddMovie(tmdb_id=_int(data, TMDB_ID))
    if kind is ActionKind.WATCHLIST_REMOVE_MOVIE:
        return WatchlistRemoveMovie(tmdb_id=_int(data, TMDB_ID))
    raise InvalidActionRequest(f"unsupported action kind: {kind!r}")  # pragma: no cover


__all__ = [
    "KIND",
    "LEGACY_SHOUT",
    "request_from_mapping",
    "request_to_mapping",
]
