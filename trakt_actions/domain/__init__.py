"""Domain layer — pure Python, no framework dependencies."""

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
from trakt_actions.domain.mapping import request_from_mapping, request_to_mapping
from trakt_actions.domain.outcome import (
    GENERIC_CLIENT_ERROR,
    OFFLINE_ERROR,
    AuthRequired,
    HardFailure,
    Outcome,
    SoftFailure,
    Success,
)
from trakt_actions.domain.formatting import format_episode_number

__all__ = [
    "ActionKind",
    "ActionRequest",
    "CheckinEpisode",
    "CheckinMovie",
    "InvalidActionRequest",
    "PostEpisodeComment",
    "PostShowComment",
    "RateEpisode",
    "RateShow",
    "Rating",
    "WatchlistAddMovie",
    "WatchlistRemoveMovie",
    "request_from_mapping",
    "request_to_mapping",
    "GENERIC_CLIENT_ERROR",
    "OFFLINE_ERROR",
    "AuthRequired",
    "HardFailure",
    "Outcome",
    "SoftFailure",
    "Success",
    "format_episode_number",
]
