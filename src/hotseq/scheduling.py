"""Timer primitives used to drive sequence sources.

Sources only need one operation from a scheduler: run a callback once after
a delay and hand back something that can be cancelled. ``asyncio`` loops
already provide that through ``call_later``; :class:`VirtualScheduler`
provides the same contract on a manual clock so runs are deterministic.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Schedule callbacks on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        # Without an explicit loop, follow whichever loop is running now so a
        # source outlives the asyncio.run() that first drove it.
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)


class VirtualTimer:
    """Pending callback on a :class:`VirtualScheduler`."""

    __slots__ = ("when", "callback", "cancelled")

    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler:
    """Manual clock. Time only moves when :meth:`advance` or :meth:`run` is called."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[tuple[float, int, VirtualTimer]] = []
        self._order = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> VirtualTimer:
        timer = VirtualTimer(self._now + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (timer.when, next(self._order), timer))
        return timer

    def call_at(self, when: float, callback: Callable[[], None]) -> VirtualTimer:
        return self.call_later(when - self._now, callback)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every callback that falls due."""
        if seconds < 0:
            raise ValueError("cannot move a virtual clock backwards")
        self._run_until(self._now + seconds)

    def run(self) -> None:
        """Fire callbacks until nothing is pending."""
        while self._queue:
            self._run_until(self._queue[0][0])

    def _run_until(self, deadline: float) -> None:
        while self._queue and self._queue[0][0] <= deadline:
            when, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = when
            timer.callback()
        self._now = max(self._now, deadline)
