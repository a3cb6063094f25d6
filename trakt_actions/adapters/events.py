"""Event publisher and notifier adapters."""

import asyncio
import logging
from typing import Optional

from trakt_actions.ports.inbound import ActionCompleteEvent

log = logging.getLogger(__name__)


class QueueEventPublisher:
    """Pushes completion events onto an asyncio queue (no polling).

    With ``loop`` set, events may be published from any thread.
    """

    def __init__(self, queue: asyncio.Queue, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.queue = queue
        self._loop = loop

    def publish(self, event: ActionCompleteEvent) -> None:
        if self._loop is not None:
            self._loop.call_soon_threadsafe(self.queue.put_nowait, event)
        else:
            self.queue.put_nowait(event)


class LogNotifier:
    """Shows user-facing messages in the log."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or log

    def notify(self, text: str, long: bool = False) -> None:
        if long:
            self.logger.warning(text)
        else:
            self.logger.info(text)
