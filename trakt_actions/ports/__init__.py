"""Port interfaces (Hexagonal Architecture)."""

from trakt_actions.ports.inbound import ActionCompleteEvent, ActionObserver
from trakt_actions.ports.outbound import (
    Environment,
    EventPublisher,
    Notifier,
    RemoteClient,
    RemoteResponse,
)

__all__ = [
    "ActionCompleteEvent",
    "ActionObserver",
    "Environment",
    "EventPublisher",
    "Notifier",
    "RemoteClient",
    "RemoteResponse",
]
