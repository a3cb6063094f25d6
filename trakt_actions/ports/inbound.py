"""Inbound port — what callers register to hear about action results."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from trakt_actions.domain.models import ActionRequest


@dataclass(frozen=True)
class ActionCompleteEvent:
    """Broadcast for every terminal success or hard failure."""

    request: ActionRequest
    success: bool


@runtime_checkable
class ActionObserver(Protocol):
    """Callbacks fired once per executed request."""

    def on_action_complete(self, request: ActionRequest, success: bool) -> None: ...

    def on_checkin_blocked(self, request: ActionRequest, wait_seconds: int) -> None: ...
