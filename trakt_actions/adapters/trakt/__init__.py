"""trakt adapter — aiohttp client and configured environment."""

from trakt_actions.adapters.trakt.client import (
    TraktClient,
    TraktError,
    TraktProtocolError,
    TraktServiceError,
    TraktTransportError,
)
from trakt_actions.adapters.trakt.environment import TraktEnvironment

__all__ = [
    "TraktClient",
    "TraktError",
    "TraktProtocolError",
    "TraktServiceError",
    "TraktTransportError",
    "TraktEnvironment",
]
