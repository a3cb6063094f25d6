"""Delivers a finished outcome to observers, the event publisher and the notifier."""

import logging
from typing import Iterable, Iterator, List, Optional

from trakt_actions.domain.models import ActionKind, ActionRequest
from trakt_actions.domain.outcome import (
    AuthRequired,
    HardFailure,
    Outcome,
    SoftFailure,
    Success,
)
from trakt_actions.ports.inbound import ActionCompleteEvent, ActionObserver
from trakt_actions.ports.outbound import EventPublisher, Notifier

log = logging.getLogger(__name__)

ON_TRAKT_SUFFIX = " on trakt"

_CHECKIN_KINDS = (ActionKind.CHECKIN_EPISODE, ActionKind.CHECKIN_MOVIE)


class ObserverSet:
    """Registered observers, in registration order.

    Observers are held until they are ``discard``ed; a discarded observer
    receives nothing from deliveries that have not happened yet.
    """

    def __init__(self, observers: Iterable[ActionObserver] = ()):
        self._observers: List[ActionObserver] = []
        for observer in observers:
            self.add(observer)

    def add(self, observer: ActionObserver) -> None:
        if observer not in self:
            self._observers.append(observer)

    def discard(self, observer: ActionObserver) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def __contains__(self, observer) -> bool:
        return any(o is observer for o in self._observers)

    def __iter__(self) -> Iterator[ActionObserver]:
        return iter(list(self._observers))

    def __len__(self) -> int:
        return len(self._observers)


class OutcomeRouter:
    """Translates an Outcome into observer callbacks, one event and one notice."""

    def __init__(
        self,
        publisher: Optional[EventPublisher] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.publisher = publisher
        self.notifier = notifier

    def deliver(self, request: ActionRequest, outcome: Outcome, observers: ObserverSet) -> None:
        if isinstance(outcome, Success):
            text = outcome.message
            if request.kind not in _CHECKIN_KINDS:
                text += ON_TRAKT_SUFFIX
            self._notify(text)
            self._publish(ActionCompleteEvent(request, True))
            self._each(observers, "on_action_complete", request, True)
        elif isinstance(outcome, SoftFailure):
            self._each(observers, "on_checkin_blocked", request, outcome.wait_seconds)
        elif isinstance(outcome, HardFailure):
            self._notify(outcome.error_message, long=True)
            self._publish(ActionCompleteEvent(request, False))
            self._each(observers, "on_action_complete", request, False)
        elif isinstance(outcome, AuthRequired):
            # nothing happened yet; the caller prompts for login and resubmits
            self._each(observers, "on_action_complete", request, False)
        else:
            raise TypeError(f"unknown outcome: {outcome!r}")

    def _notify(self, text: str, long: bool = False) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify(text, long=long)
        except Exception as e:
            log.warning("notifier failed: %s", e)

    def _publish(self, event: ActionCompleteEvent) -> None:
        if self.publisher is None:
            return
        try:
            self.publisher.publish(event)
        except Exception as e:
            log.warning("event publish failed: %s", e)

    @staticmethod
    def _each(observers: ObserverSet, callback: str, *args) -> None:
        for observer in observers:
            try:
                getattr(observer, callback)(*args)
            except Exception as e:
                log.error("observer %r raised in %s: %s", observer, callback, e)
