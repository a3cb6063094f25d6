"""trakt actions — background dispatcher for trakt check-ins, ratings, comments and watchlist edits."""

from trakt_actions.config import AppConfig, TraktConfig, __version__
from trakt_actions.dispatcher import ActionDispatcher, ActionHandle
from trakt_actions.executor import ActionExecutor
from trakt_actions.router import ObserverSet, OutcomeRouter
from trakt_actions.domain import (
    ActionKind,
    ActionRequest,
    AuthRequired,
    CheckinEpisode,
    CheckinMovie,
    HardFailure,
    InvalidActionRequest,
    Outcome,
    PostEpisodeComment,
    PostShowComment,
    RateEpisode,
    RateShow,
    Rating,
    SoftFailure,
    Success,
    WatchlistAddMovie,
    WatchlistRemoveMovie,
)
from trakt_actions.ports import ActionCompleteEvent, ActionObserver

__all__ = [
    "__version__",
    "AppConfig",
    "TraktConfig",
    "ActionDispatcher",
    "ActionHandle",
    "ActionExecutor",
    "ObserverSet",
    "OutcomeRouter",
    "ActionKind",
    "ActionRequest",
    "AuthRequired",
    "CheckinEpisode",
    "CheckinMovie",
    "HardFailure",
    "InvalidActionRequest",
    "Outcome",
    "PostEpisodeComment",
    "PostShowComment",
    "RateEpisode",
    "RateShow",
    "Rating",
    "SoftFailure",
    "Success",
    "WatchlistAddMovie",
    "WatchlistRemoveMovie",
    "ActionCompleteEvent",
    "ActionObserver",
]
