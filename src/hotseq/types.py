"""Observer and subscription capabilities shared by all sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Observer(Protocol):
    """Anything exposing ``next(value)`` and ``complete()``."""

    def next(self, value: Any) -> None: ...

    def complete(self) -> None: ...


@runtime_checkable
class Subscription(Protocol):
    @property
    def closed(self) -> bool: ...

    def unsubscribe(self) -> None: ...


@dataclass(eq=False)
class CallbackObserver:
    """Adapt plain callables to the observer capability."""

    on_next: Callable[[Any], None]
    on_complete: Callable[[], None] | None = None

    def next(self, value: Any) -> None:
        self.on_next(value)

    def complete(self) -> None:
        if self.on_complete is not None:
            self.on_complete()
