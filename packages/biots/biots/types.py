"""Shared type aliases and protocols for the tick engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol


class RandomSource(Protocol):
    """Injected randomness capability. ``random.Random`` satisfies it."""

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...
    def seed(self, a: Any = None) -> None: ...


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    request_stop: Callable[[], None]
    random: RandomSource


class EntropyError(RuntimeError):
    """Raised when no entropy source is available to seed the engine."""


System = Callable[[Any, TickContext], None]
