"""Cold counterpart: every subscription drives its own run of the sequence."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from hotseq.scheduling import AsyncioScheduler, Scheduler, TimerHandle
from hotseq.types import Observer

logger = logging.getLogger(__name__)


class UnicastSubscription:
    """One independent run, from index 0, for a single observer."""

    def __init__(self, source: UnicastSequenceSource, observer: Observer) -> None:
        self._source = source
        self.observer = observer
        self._index = 0
        self._timer: TimerHandle | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._source._active.discard(self)

    def _schedule(self) -> None:
        self._timer = self._source._scheduler.call_later(self._source.delay, self._step)

    def _step(self) -> None:
        self._timer = None
        values = self._source.values
        self.observer.next(values[self._index])
        if self._closed:
            return
        if self._index == len(values) - 1:
            self._source._active.discard(self)
            self.observer.complete()
            return
        self._index += 1
        self._schedule()


class UnicastSequenceSource:
    """Emit ``values`` one per ``delay`` seconds, separately for each subscriber."""

    def __init__(
        self,
        values: Iterable[Any],
        delay: float = 1.0,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._values = tuple(values)
        if not self._values:
            raise ValueError("sequence must contain at least one value")
        if delay <= 0:
            raise ValueError("delay must be positive")
        self._delay = float(delay)
        self._scheduler = scheduler or AsyncioScheduler()
        self._active: set[UnicastSubscription] = set()

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def observer_count(self) -> int:
        return len(self._active)

    def subscribe(self, observer: Observer) -> UnicastSubscription:
        subscription = UnicastSubscription(self, observer)
        self._active.add(subscription)
        logger.debug("Starting independent run (%d active)", len(self._active))
        subscription._schedule()
        return subscription
