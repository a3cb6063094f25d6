"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from trakt_actions.domain.models import Rating
from trakt_actions.ports.inbound import ActionCompleteEvent

STATUS_SUCCESS = "success"
STATUS_FAILURE = "failure"


@dataclass
class RemoteResponse:
    """Unified result type for trakt write operations."""

    status: str
    message: Optional[str] = None
    error: Optional[str] = None
    wait: int = 0
    show_title: Optional[str] = None
    movie_title: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS


@runtime_checkable
class RemoteClient(Protocol):
    """Authenticated trakt client, one method per supported action."""

    async def checkin_episode(
        self, show_id: int, season: int, episode: int, message: Optional[str] = None
    ) -> RemoteResponse: ...

    async def checkin_movie(self, imdb_id: str, message: Optional[str] = None) -> RemoteResponse: ...

    async def rate_episode(
        self, show_id: int, season: int, episode: int, rating: Rating
    ) -> RemoteResponse: ...

    async def rate_show(self, show_id: int, rating: Rating) -> RemoteResponse: ...

    async def comment_show(self, show_id: int, comment: str, spoiler: bool = False) -> RemoteResponse: ...

    async def comment_episode(
        self, show_id: int, season: int, episode: int, comment: str, spoiler: bool = False
    ) -> RemoteResponse: ...

    async def watchlist_movie(self, tmdb_id: int) -> None: ...

    async def unwatchlist_movie(self, tmdb_id: int) -> None: ...


@runtime_checkable
class Environment(Protocol):
    """Connectivity, credential and client capabilities of the host."""

    async def is_network_reachable(self) -> bool: ...

    async def has_valid_credentials(self) -> bool: ...

    async def acquire_authenticated_client(self) -> Optional[RemoteClient]: ...


@runtime_checkable
class EventPublisher(Protocol):
    """Interface for broadcasting completed actions."""

    def publish(self, event: ActionCompleteEvent) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Interface for showing a short message to the user."""

    def notify(self, text: str, long: bool = False) -> None: ...
