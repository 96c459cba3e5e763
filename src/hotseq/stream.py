"""Bridge observer notifications into asyncio queue consumers."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator

_COMPLETE = object()


class QueueObserver:
    """Push notifications into a bounded queue, dropping the oldest when full.

    Callbacks run synchronously inside the source's timer callback, so they
    never block; consumers drain the queue with :meth:`items`.
    """

    def __init__(self, maxsize: int = 100) -> None:
        self.queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=maxsize)
        self.dropped = 0

    def next(self, value: Any) -> None:
        self._put(value)

    def complete(self) -> None:
        self._put(_COMPLETE)

    async def items(self) -> AsyncIterator[Any]:
        """Yield values until the source completes."""
        while True:
            item = await self.queue.get()
            if item is _COMPLETE:
                return
            yield item

    def _put(self, item: Any) -> None:
        if self.queue.full():
            try:
                self.queue.get_nowait()
                self.dropped += 1
            except asyncio.QueueEmpty:
                pass
        try:
            self.queue.put_nowait(item)
        except asyncio.QueueFull:
            self.dropped += 1
