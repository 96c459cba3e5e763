"""Observer that keeps a log of everything it was told."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from hotseq.events.schemas import CompleteNotification, NextNotification, NotificationBase


class SequenceCounter:
    """Monotonic sequence counter, shareable across recorders."""

    def __init__(self, start: int = 0):
        self._value = start

    def next(self) -> int:
        self._value += 1
        return self._value


class RecordingObserver:
    """Record notifications in memory and optionally append them to a JSONL file.

    ``clock`` is read for each notification so records carry the scheduler's
    notion of time (for example ``VirtualScheduler.now``).
    """

    def __init__(
        self,
        name: str,
        counter: SequenceCounter | None = None,
        jsonl_path: str | Path | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.name = name
        self.counter = counter or SequenceCounter()
        self.jsonl_path = Path(jsonl_path) if jsonl_path else None
        self.clock = clock
        self.notifications: list[NotificationBase] = []

    @property
    def values(self) -> list[Any]:
        return [n.value for n in self.notifications if isinstance(n, NextNotification)]

    @property
    def completed(self) -> bool:
        return any(isinstance(n, CompleteNotification) for n in self.notifications)

    @property
    def complete_count(self) -> int:
        return sum(1 for n in self.notifications if isinstance(n, CompleteNotification))

    def next(self, value: Any) -> None:
        self._record(
            NextNotification(
                seq=self.counter.next(),
                observer=self.name,
                clock=self._now(),
                value=value,
            )
        )

    def complete(self) -> None:
        self._record(
            CompleteNotification(seq=self.counter.next(), observer=self.name, clock=self._now())
        )

    def _now(self) -> float | None:
        return self.clock() if self.clock else None

    def _record(self, notification: NotificationBase) -> None:
        self.notifications.append(notification)
        if self.jsonl_path is not None:
            self._write_jsonl(notification.model_dump(mode="json"))

    def _write_jsonl(self, payload: dict) -> None:
        self.jsonl_path.parent.mkdir(parents=True, exist_ok=True)
        with self.jsonl_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload) + "\n")
