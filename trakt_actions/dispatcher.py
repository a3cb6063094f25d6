"""Background submission of action requests.

Each submitted request gets its own asyncio task: executor first, then
the router, on the loop that called ``submit()``. Nothing blocks the
caller; the returned handle can be awaited or cancelled.
"""

import asyncio
import logging
from typing import Iterable, Optional, Set

from trakt_actions.domain.models import ActionRequest
from trakt_actions.domain.outcome import GENERIC_CLIENT_ERROR, HardFailure, Outcome
from trakt_actions.executor import ActionExecutor
from trakt_actions.ports.inbound import ActionObserver
from trakt_actions.ports.outbound import Environment
from trakt_actions.router import ObserverSet, OutcomeRouter

log = logging.getLogger(__name__)


class ActionHandle:
    """Cancellable reference to one in-flight request."""

    def __init__(self, request: ActionRequest, observers: Iterable[ActionObserver] = ()):
        self.request = request
        # observers registered for this request only
        self.observers = ObserverSet(observers)
        self._cancelled = False
        self._delivered = False
        self._task: Optional[asyncio.Task] = None

    def cancel(self) -> None:
        """Abandon the request if its remote call has not started yet."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def is_cancelled(self) -> bool:
        return self._cancelled

    def done(self) -> bool:
        return self._task is not None and self._task.done()

    async def result(self) -> Optional[Outcome]:
        """Wait for the delivered outcome; None if the request was abandoned."""
        return await self._task

    def __await__(self):
        return self.result().__await__()

    def _mark_delivered(self) -> bool:
        if self._delivered:
            return False
        self._delivered = True
        return True


class ActionDispatcher:
    """Submits requests for background execution and routes their outcomes."""

    def __init__(
        self,
        env: Environment,
        router: Optional[OutcomeRouter] = None,
        observers: Iterable[ActionObserver] = (),
        executor: Optional[ActionExecutor] = None,
    ):
        self.env = env
        self.router = router or OutcomeRouter()
        self.observers = ObserverSet(observers)
        self.executor = executor or ActionExecutor()
        self._tasks: Set[asyncio.Task] = set()

    def submit(
        self,
        request: ActionRequest,
        observers: Optional[Iterable[ActionObserver]] = None,
    ) -> ActionHandle:
        """Schedule ``request`` on the running loop and return immediately."""
        loop = asyncio.get_running_loop()
        handle = ActionHandle(request, observers or ())
        task = loop.create_task(self._run(handle))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        handle._task = task
        return handle

    def pending(self) -> int:
        """Number of submitted requests that have not finished."""
        return len(self._tasks)

    async def _run(self, handle: ActionHandle) -> Optional[Outcome]:
        request = handle.request
        try:
            outcome = await self.executor.execute(request, self.env, handle.is_cancelled)
        except Exception as e:
            # only a misbehaving environment probe gets here
            log.error("%s aborted: %s", type(request).__name__, e, exc_info=True)
            outcome = HardFailure(GENERIC_CLIENT_ERROR)
        if outcome is None:
            return None
        if handle._mark_delivered():
            # observers discarded while the request was running get nothing
            targets = ObserverSet(self.observers)
            for observer in handle.observers:
                targets.add(observer)
            self.router.deliver(request, outcome, targets)
        return outcome
