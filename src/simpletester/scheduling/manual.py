"""Scheduler whose pending continuations are drained explicitly by the host."""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque

from .base import Continuation, Scheduler

logger = logging.getLogger(__name__)


class ManualScheduler(Scheduler):
    """FIFO scheduler for hosts without an event loop, and for tests.

    Continuations are queued by :meth:`defer` and only run when the host calls
    :meth:`run_pending` or :meth:`run_until_idle`.
    """

    name = "manual"

    def __init__(self) -> None:
        self._pending: Deque[Continuation] = deque()

    def defer(self, continuation: Continuation) -> None:
        self._pending.append(continuation)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_pending(self) -> int:
        """Run the continuations queued before this call; return how many ran.

        Anything deferred while draining waits for the next call, which keeps
        each batch a separate turn.
        """

        batch = len(self._pending)
        for _ in range(batch):
            continuation = self._pending.popleft()
            continuation()
        if batch:
            logger.debug("ran %d deferred continuation(s), %d pending", batch, len(self._pending))
        return batch

    def run_until_idle(self, *, max_turns: int | None = None) -> int:
        """Drain turns until nothing is pending; return the number of turns."""

        turns = 0
        while self._pending:
            if max_turns is not None and turns >= max_turns:
                break
            self.run_pending()
            turns += 1
        return turns
