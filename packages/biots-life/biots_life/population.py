"""Population - owns the biots and runs the per-tick pipeline."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from biots_spatial import PointGrid, TreePoint

from biots_life.biot import Biot
from biots_life.combat import resolve_combat
from biots_life.config import WorldConfig
from biots_life.feeding import feeding_direction

if TYPE_CHECKING:
    from biots import RandomSource

logger = logging.getLogger(__name__)

INDEX_CELL_SIZE = 32.0


class TickPhase(enum.Enum):
    IDLE = "idle"
    INDEX_BUILT = "index_built"
    ENTITIES_UPDATED = "entities_updated"
    COMBAT_RESOLVED = "combat_resolved"
    POPULATION_PRUNED = "population_pruned"


@dataclass(frozen=True)
class TickReport:
    """What happened during the most recent tick."""

    births: int = 0
    deaths: int = 0
    kills: int = 0
    size: int = 0


@dataclass(frozen=True)
class BiotView:
    """Read-only snapshot of one biot, for display."""

    position: tuple[float, float]
    attack: float
    defense: float
    photosynthesis: float
    motion: float
    intelligence: float
    weight: float
    life: float


class Population:
    """Ordered collection of live biots in a toroidal world.

    List positions are the keys the spatial index hands back, and they are
    only stable for the duration of one tick. The list is replaced as a
    whole at the end of :meth:`step`, never edited mid-tick.
    """

    def __init__(
        self, biots: list[Biot] | None = None, world: WorldConfig | None = None
    ) -> None:
        self._biots: list[Biot] = list(biots) if biots is not None else []
        self._world = world if world is not None else WorldConfig()
        self._phase = TickPhase.IDLE
        self._last_tick = TickReport(size=len(self._biots))

    @classmethod
    def random(
        cls, count: int, rng: RandomSource, world: WorldConfig | None = None
    ) -> Population:
        population = cls(world=world)
        population.populate(count, rng)
        return population

    def populate(self, count: int, rng: RandomSource) -> None:
        """Add ``count`` random biots. Only call between ticks."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._biots.extend(Biot.random(rng, self._world) for _ in range(count))
        self._last_tick = TickReport(size=len(self._biots))

    @property
    def world(self) -> WorldConfig:
        return self._world

    @property
    def phase(self) -> TickPhase:
        return self._phase

    @property
    def last_tick(self) -> TickReport:
        return self._last_tick

    @property
    def biots(self) -> tuple[Biot, ...]:
        return tuple(self._biots)

    def __len__(self) -> int:
        return len(self._biots)

    def view(self) -> Iterator[BiotView]:
        for biot in self._biots:
            x, y = biot.position
            yield BiotView(
                position=(x, y),
                attack=biot.attack,
                defense=biot.defense,
                photosynthesis=biot.photosynthesis,
                motion=biot.motion,
                intelligence=biot.intelligence,
                weight=biot.weight,
                life=biot.life,
            )

    def build_index(self) -> PointGrid:
        return PointGrid.bulk_load(
            (TreePoint(b.position[0], b.position[1], n) for n, b in enumerate(self._biots)),
            cell_size=INDEX_CELL_SIZE,
        )

    def step(self, rng: RandomSource) -> None:
        biots = self._biots
        index = self.build_index()
        self._phase = TickPhase.INDEX_BUILT

        offspring: list[Biot] = []
        for slot, biot in enumerate(biots):
            feed_dir = None
            if biot.intelligence > 0.0:
                feed_dir = feeding_direction(biots, index, slot)
            child = biot.step(index, feed_dir, rng, self._world, slot)
            if child is not None:
                offspring.append(child)
        self._phase = TickPhase.ENTITIES_UPDATED

        kills = resolve_combat(biots, index)
        self._phase = TickPhase.COMBAT_RESOLVED

        survivors = [b for b in biots if not b.is_dead()]
        deaths = len(biots) - len(survivors)
        survivors.extend(offspring)
        self._biots = survivors
        self._phase = TickPhase.POPULATION_PRUNED

        self._last_tick = TickReport(
            births=len(offspring), deaths=deaths, kills=kills, size=len(survivors)
        )
        logger.debug(
            "tick: births=%d deaths=%d kills=%d size=%d",
            len(offspring), deaths, kills, len(survivors),
        )
        self._phase = TickPhase.IDLE


def create_population(
    count: int, rng: RandomSource, world: WorldConfig | None = None
) -> Population:
    return Population.random(count, rng, world)


def step(population: Population, rng: RandomSource) -> None:
    population.step(rng)


def population_size(population: Population) -> int:
    return len(population)
