"""Trailing-edge throttling of an async action on the running event loop."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable

log = logging.getLogger(__name__)


class ThrottleState(Enum):
    IDLE = "idle"
    REQUESTED = "requested"
    RUNNING = "running"


class Throttle:
    """Coalesce bursts of requests into at most one action per window.

    The first request opens a window of *interval* seconds. Requests that
    arrive before it closes are folded into it, and the action runs once
    when it closes. Requests that arrive while the action is running open
    exactly one more window. Only one action is ever in flight.

    If the task is cancelled (for example by ``asyncio.run`` shutting the
    loop down) while a request is still open, *on_cancel* runs it
    synchronously instead. Failures go to *logger*.

    Usage:
        throttle = Throttle(0.1, write)
        throttle.request()
        throttle.request()      # coalesced
        await throttle.wait()   # write ran once
    """

    def __init__(
        self,
        interval: float,
        action: Callable[[], Awaitable[object]],
        on_cancel: Callable[[], object] | None = None,
        logger: Any = None,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self.interval = interval
        self._action = action
        self._on_cancel = on_cancel
        self._log = logger if logger is not None else log
        self._pending = False
        self._running = False
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ThrottleState:
        if self._running:
            return ThrottleState.RUNNING
        if self._task is not None:
            return ThrottleState.REQUESTED
        return ThrottleState.IDLE

    @property
    def pending(self) -> bool:
        """True if a request is waiting for its window to close."""
        return self._pending

    def request(self) -> None:
        """Record a request. Must be called from a running event loop."""
        self._pending = True
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._drain())
            self._task.add_done_callback(self._finished)

    async def wait(self) -> None:
        """Wait until no window is open and no action is running."""
        while self._task is not None:
            await asyncio.shield(self._task)

    async def _drain(self) -> None:
        try:
            while self._pending:
                await asyncio.sleep(self.interval)
                self._pending = False
                self._running = True
                try:
                    await self._action()
                except Exception as exc:
                    self._log.error("throttled action failed: %s", exc)
                self._running = False
        finally:
            self._task = None

    def _finished(self, task: asyncio.Task[None]) -> None:
        # also reached when the task was cancelled before its first step
        if self._task is task:
            self._task = None
        if task.cancelled():
            self._cancelled()

    def _cancelled(self) -> None:
        running, self._running = self._running, False
        if not self._pending:
            return
        self._pending = False
        if self._on_cancel is None or running:
            self._log.warning("throttled action cancelled, pending request dropped")
            return
        try:
            self._on_cancel()
        except Exception as exc:
            self._log.error("throttled action failed: %s", exc)
