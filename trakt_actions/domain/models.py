"""Domain data models — pure Python dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union


class InvalidActionRequest(ValueError):
    """Raised when a request or its flat mapping is malformed"""
    pass


class ActionKind(Enum):
    CHECKIN_EPISODE = "checkin_episode"
    CHECKIN_MOVIE = "checkin_movie"
    RATE_EPISODE = "rate_episode"
    RATE_SHOW = "rate_show"
    POST_SHOW_COMMENT = "post_show_comment"
    POST_EPISODE_COMMENT = "post_episode_comment"
    WATCHLIST_ADD_MOVIE = "watchlist_add_movie"
    WATCHLIST_REMOVE_MOVIE = "watchlist_remove_movie"


class Rating(Enum):
    """trakt advanced rating steps."""

    WEAK_SAUCE = 1
    TERRIBLE = 2
    BAD = 3
    POOR = 4
    MEH = 5
    FAIR = 6
    GOOD = 7
    GREAT = 8
    SUPERB = 9
    TOTALLY_NINJA = 10

    @classmethod
    def from_value(cls, value: Union["Rating", int, str]) -> "Rating":
        """Parse a rating from an int, a numeric string or "love"/"hate"."""
        if isinstance(value, Rating):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            # simple ratings of the old API
            if text == "love":
                return cls.TOTALLY_NINJA
            if text == "hate":
                return cls.WEAK_SAUCE
            if not text.isdigit():
                raise ValueError(f"invalid rating: {value!r}")
            value = int(text)
        if isinstance(value, bool):
            raise ValueError(f"invalid rating: {value!r}")
        return cls(value)


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidActionRequest(f"{name} must be an integer, got {value!r}")


def _require_text(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidActionRequest(f"{name} must be a non-empty string")


def _blank_message(request: ActionRequest) -> None:
    # "" and None both mean no message
    message = request.message
    if message is not None and not isinstance(message, str):
        raise InvalidActionRequest("message must be a string")
    if message is not None and not message.strip():
        object.__setattr__(request, "message", None)


@dataclass(frozen=True)
class ActionRequest:
    """Base of all action requests; each subclass carries only its own fields."""

    kind: ClassVar[ActionKind]

    def to_mapping(self) -> Dict[str, Any]:
        from trakt_actions.domain.mapping import request_to_mapping

        return request_to_mapping(self)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "ActionRequest":
        from trakt_actions.domain.mapping import request_from_mapping

        return request_from_mapping(data)


@dataclass(frozen=True)
class CheckinEpisode(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.CHECKIN_EPISODE

    show_id: int
    season: int
    episode: int
    message: Optional[str] = None

    def __post_init__(self):
        _require_int("show_id", self.show_id)
        _require_int("season", self.season)
        _require_int("episode", self.episode)
        _blank_message(self)


@dataclass(frozen=True)
class CheckinMovie(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.CHECKIN_MOVIE

    imdb_id: str
    message: Optional[str] = None

    def __post_init__(self):
        _require_text("imdb_id", self.imdb_id)
        _blank_message(self)


@dataclass(frozen=True)
class RateEpisode(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.RATE_EPISODE

    show_id: int
    season: int
    episode: int
    rating: Rating

    def __post_init__(self):
        _require_int("show_id", self.show_id)
        _require_int("season", self.season)
        _require_int("episode", self.episode)
        if not isinstance(self.rating, Rating):
            raise InvalidActionRequest(f"rating must be a Rating, got {self.rating!r}")


@dataclass(frozen=True)
class RateShow(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.RATE_SHOW

    show_id: int
    rating: Rating

    def __post_init__(self):
        _require_int("show_id", self.show_id)
        if not isinstance(self.rating, Rating):
            raise InvalidActionRequest(f"rating must be a Rating, got {self.rating!r}")


@dataclass(frozen=True)
class PostShowComment(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.POST_SHOW_COMMENT

    show_id: int
    message: str
    is_spoiler: bool = False

    def __post_init__(self):
        _require_int("show_id", self.show_id)
        _require_text("message", self.message)


@dataclass(frozen=True)
class PostEpisodeComment(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.POST_EPISODE_COMMENT

    show_id: int
    season: int
    episode: int
    message: str
    is_spoiler: bool = False

    def __post_init__(self):
        _require_int("show_id", self.show_id)
        _require_int("season", self.season)
        _require_int("episode", self.episode)
        _require_text("message", self.message)
        # episode 0 means "the whole show", which is PostShowComment
        if self.episode == 0:
            raise InvalidActionRequest("episode comments need a nonzero episode number")


@dataclass(frozen=True)
class WatchlistAddMovie(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.WATCHLIST_ADD_MOVIE

    tmdb_id: int

    def __post_init__(self):
        _require_int("tmdb_id", self.tmdb_id)


@dataclass(frozen=True)
class WatchlistRemoveMovie(ActionRequest):
    kind: ClassVar[ActionKind] = ActionKind.WATCHLIST_REMOVE_MOVIE

    tmdb_id: int

    def __post_init__(self):
        _require_int("tmdb_id", self.tmdb_id)
