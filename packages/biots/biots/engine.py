"""Engine - tick loop, seeded randomness, and lifecycle hooks."""

import logging
import os
import random
from typing import Any, Callable

from biots.types import EntropyError, System, TickContext

logger = logging.getLogger(__name__)


def entropy_seed() -> int:
    """Draw a 64-bit seed from the operating system's entropy pool."""
    try:
        return int.from_bytes(os.urandom(8))
    except (NotImplementedError, OSError) as exc:
        raise EntropyError("No entropy source available to seed the simulation") from exc


class Engine:
    """Drives an arbitrary ``world`` object through ordered systems.

    Every system receives the world and a :class:`TickContext` whose
    ``random`` attribute is the single seeded generator for the run.
    Build the world's initial contents from :attr:`rng` so that setup and
    ticks consume one stream.
    """

    def __init__(self, world: Any, seed: int | None = None) -> None:
        self._world = world
        self._tick_number = 0
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[Any, TickContext], None]] = []
        self._stop_hooks: list[Callable[[Any, TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = entropy_seed()
        self._seed = seed
        self._rng = random.Random(seed)
        logger.info("Engine seeded with %d", seed)

    @property
    def world(self) -> Any:
        return self._world

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    def reseed(self, seed: int | None = None) -> None:
        if seed is None:
            seed = entropy_seed()
        self._seed = seed
        self._rng.seed(seed)
        logger.info("Engine reseeded with %d", seed)

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[Any, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Any, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        logger.debug("Stop requested at tick %d", self._tick_number)
        self._stop_requested = True

    def _context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def _tick(self) -> None:
        self._tick_number += 1
        ctx = self._context()
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._world, ctx)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._world, ctx)
