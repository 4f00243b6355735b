"""Scheduler backed by an asyncio event loop."""
from __future__ import annotations

import asyncio
from typing import Optional

from .base import Continuation, Scheduler


class AsyncioScheduler(Scheduler):
    """Defers continuations with ``loop.call_soon``.

    When no loop is given, the running loop at the time of :meth:`defer` is
    used, so the scheduler can be built outside the loop it will serve.
    """

    name = "asyncio"

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def defer(self, continuation: Continuation) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(continuation)
