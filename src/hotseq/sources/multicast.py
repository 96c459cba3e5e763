"""Shared ("hot") timed sequence fanned out to every current observer."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from hotseq.scheduling import AsyncioScheduler, Scheduler, TimerHandle
from hotseq.types import Observer

logger = logging.getLogger(__name__)


class MulticastSubscription:
    """Handle returned by :meth:`MulticastSequenceSource.subscribe`."""

    def __init__(self, source: MulticastSequenceSource, observer: Observer) -> None:
        self._source = source
        self.observer = observer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._source._remove(self)


class MulticastSequenceSource:
    """Emit ``values`` one per ``delay`` seconds to all registered observers.

    One timer drives the run no matter how many observers are attached. The
    first subscription starts it at index 0; later subscriptions join at the
    current position and never see earlier values. Removing the last
    registration cancels the pending timer and resets the run, so the next
    subscription starts again from the beginning.
    """

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
        self._registry: dict[MulticastSubscription, Observer] = {}
        self._timer: TimerHandle | None = None
        self._index = 0
        self._completed = False
        self._run = 0

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def observer_count(self) -> int:
        return len(self._registry)

    @property
    def running(self) -> bool:
        return self._timer is not None

    @property
    def completed(self) -> bool:
        return self._completed

    def subscribe(self, observer: Observer) -> MulticastSubscription:
        subscription = MulticastSubscription(self, observer)
        self._registry[subscription] = observer
        if len(self._registry) == 1:
            self._start()
        else:
            logger.debug(
                "Observer joined running sequence at index %d (%d observers)",
                self._index,
                len(self._registry),
            )
        return subscription

    def _remove(self, subscription: MulticastSubscription) -> None:
        if self._registry.pop(subscription, None) is None:
            return
        if not self._registry:
            self._teardown()

    def _start(self) -> None:
        self._run += 1
        self._index = 0
        self._completed = False
        logger.info("Starting sequence of %d values every %.3fs", len(self._values), self._delay)
        self._schedule()

    def _teardown(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            logger.info("Last observer left at index %d; timer cancelled", self._index)
        self._timer = None
        self._run += 1
        self._index = 0
        self._completed = False

    def _schedule(self) -> None:
        self._timer = self._scheduler.call_later(self._delay, self._step)

    def _step(self) -> None:
        self._timer = None
        run = self._run
        value = self._values[self._index]
        for subscription, observer in list(self._registry.items()):
            # An earlier observer may have unsubscribed this one during the fan-out.
            if subscription in self._registry:
                observer.next(value)

        if run != self._run:
            # Every observer left from inside a callback, so this run was torn down.
            return

        if self._index == len(self._values) - 1:
            self._completed = True
            logger.info("Sequence complete; notifying %d observers", len(self._registry))
            for observer in list(self._registry.values()):
                observer.complete()
            return

        self._index += 1
        self._schedule()
