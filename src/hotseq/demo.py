"""Two-subscriber walkthrough contrasting multicast with unicast sources."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable, Literal

from hotseq.config import AppSettings
from hotseq.events.recorder import RecordingObserver, SequenceCounter
from hotseq.scheduling import AsyncioScheduler, Scheduler, VirtualScheduler
from hotseq.sources import MulticastSequenceSource, UnicastSequenceSource

logger = logging.getLogger(__name__)

Mode = Literal["multicast", "unicast"]

FIRST = "1st"
SECOND = "2nd"


class ConsoleObserver(RecordingObserver):
    """Recording observer that also prints each notification."""

    def __init__(
        self,
        name: str,
        emit: Callable[[str], None],
        on_done: Callable[[], None] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, **kwargs)
        self.emit = emit
        self.on_done = on_done

    def next(self, value: Any) -> None:
        super().next(value)
        self.emit(f"{self.name} subscribe: {value}")

    def complete(self) -> None:
        super().complete()
        self.emit(f"{self.name} sequence finished.")
        if self.on_done is not None:
            self.on_done()


def build_source(settings: AppSettings, mode: Mode, scheduler: Scheduler):
    cls = MulticastSequenceSource if mode == "multicast" else UnicastSequenceSource
    return cls(
        values=settings.sequence.values,
        delay=settings.sequence.delay_seconds,
        scheduler=scheduler,
    )


def _wire(
    settings: AppSettings,
    mode: Mode,
    scheduler: Scheduler,
    emit: Callable[[str], None],
    clock: Callable[[], float],
    jsonl_path: str | Path | None,
    on_done: Callable[[], None] | None = None,
) -> dict[str, ConsoleObserver]:
    source = build_source(settings, mode, scheduler)
    counter = SequenceCounter()
    observers = {
        name: ConsoleObserver(
            name,
            emit=emit,
            on_done=on_done,
            counter=counter,
            jsonl_path=jsonl_path,
            clock=clock,
        )
        for name in (FIRST, SECOND)
    }

    source.subscribe(observers[FIRST])
    late_at = settings.demo.late_subscribe_at_seconds
    scheduler.call_later(late_at, lambda: source.subscribe(observers[SECOND]))
    logger.info("Running %s demo; second subscriber joins at %.2fs", mode, late_at)
    return observers


def run_demo(
    settings: AppSettings,
    mode: Mode = "multicast",
    emit: Callable[[str], None] = print,
    jsonl_path: str | Path | None = None,
) -> dict[str, ConsoleObserver]:
    """Run the scenario instantly on a virtual clock."""
    scheduler = VirtualScheduler()
    observers = _wire(settings, mode, scheduler, emit, lambda: scheduler.now, jsonl_path)
    scheduler.run()
    return observers


async def run_demo_realtime(
    settings: AppSettings,
    mode: Mode = "multicast",
    emit: Callable[[str], None] = print,
    jsonl_path: str | Path | None = None,
) -> dict[str, ConsoleObserver]:
    """Run the scenario on the event loop in wall-clock time."""
    loop = asyncio.get_running_loop()
    started = loop.time()
    done = asyncio.Event()
    remaining = 2

    def _on_done() -> None:
        nonlocal remaining
        remaining -= 1
        if remaining == 0:
            done.set()

    observers = _wire(
        settings,
        mode,
        AsyncioScheduler(loop),
        emit,
        lambda: loop.time() - started,
        jsonl_path,
        on_done=_on_done,
    )
    # A late subscriber that arrives after a multicast run has ended never completes.
    run_seconds = (len(settings.sequence.values) + 1) * settings.sequence.delay_seconds
    deadline = settings.demo.late_subscribe_at_seconds + run_seconds
    try:
        await asyncio.wait_for(done.wait(), timeout=deadline)
    except asyncio.TimeoutError:
        logger.warning("Demo stopped after %.2fs without every observer completing", deadline)
    return observers
