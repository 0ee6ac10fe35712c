"""Biot - a single organism and its per-tick update rule."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from biots_physics import apply_drag, impulse, random_direction, vec, wrap_position

from biots_life.genome import Traits, derive_traits, mutate, random_genome

if TYPE_CHECKING:
    from biots import RandomSource
    from biots_spatial import PointIndex

    from biots_life.config import WorldConfig

# --- Balance constants ---
MAX_AGE = 10_000
DRAG = 0.9
ENERGY_RATE = 0.4
ADULT_FACTOR = 4.0
CROWD_RANK = 5            # nth nearest other biot checked before breeding
CROWD_DISTANCE_2 = 200.0
MUTATION_CHANCE = 0.2
BIRTH_SPEED = 1.5
MOVE_CHANCE = 0.2
MOVE_FORCE = 7.0
DEFENSE_FACTOR = 0.8


@dataclass(eq=False)
class Biot:
    """Organism state plus traits derived from its genome.

    ``traits`` is always recomputed from ``genome``; use :meth:`mutate` or
    :meth:`set_genome` rather than assigning either one directly. When
    ``life`` is omitted the biot starts with its base life.
    """

    genome: str
    position: vec.Vec = (0.0, 0.0)
    velocity: vec.Vec = (0.0, 0.0)
    life: float | None = None
    age: int = 0
    traits: Traits = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.traits = derive_traits(self.genome)
        if self.life is None:
            self.life = self.traits.base_life

    @classmethod
    def random(cls, rng: RandomSource, world: WorldConfig) -> Biot:
        genome = random_genome(rng)
        x = rng.random() * world.width
        y = rng.random() * world.height
        return cls(genome=genome, position=(x, y))

    # -- Derived values --

    @property
    def attack(self) -> float:
        return self.traits.attack

    @property
    def defense(self) -> float:
        return self.traits.defense

    @property
    def photosynthesis(self) -> float:
        return self.traits.photosynthesis

    @property
    def motion(self) -> float:
        return self.traits.motion

    @property
    def intelligence(self) -> float:
        return self.traits.intelligence

    @property
    def weight(self) -> float:
        return self.traits.weight

    @property
    def base_life(self) -> float:
        return self.traits.base_life

    @property
    def metabolism(self) -> float:
        return self.traits.metabolism

    def is_dead(self) -> bool:
        return self.life <= 0.0 or self.age >= MAX_AGE

    def stronger(self, other: Biot) -> bool:
        return stronger(self, other)

    # -- Genome --

    def set_genome(self, genome: str) -> None:
        self.genome = genome
        self.traits = derive_traits(genome)

    def mutate(self, rng: RandomSource) -> None:
        self.set_genome(mutate(self.genome, rng))

    # -- Motion --

    def accelerate(self, direction: vec.Vec, speed: float) -> None:
        self.velocity = impulse(self.velocity, direction, speed)

    def random_move(self, rng: RandomSource, speed: float) -> None:
        self.accelerate(random_direction(rng), speed)

    # -- Tick --

    def spawn(self, rng: RandomSource) -> Biot:
        child = Biot(
            genome=self.genome,
            position=self.position,
            velocity=self.velocity,
        )
        while rng.random() < MUTATION_CHANCE:
            child.mutate(rng)
        child.life = child.base_life
        child.random_move(rng, BIRTH_SPEED)
        return child

    def crowded(self, index: PointIndex, slot: int) -> bool:
        """True when the ``CROWD_RANK``-th nearest other biot is close by.

        The entry tagged with ``slot`` is this biot and is skipped before
        counting.
        """
        x, y = self.position
        others = (
            (point, d2)
            for point, d2 in index.nearest_iter_with_distance_2(x, y)
            if point.idx != slot
        )
        nth = next(itertools.islice(others, CROWD_RANK - 1, None), None)
        return nth is not None and nth[1] <= CROWD_DISTANCE_2

    def step(
        self,
        index: PointIndex,
        feed_dir: vec.Vec | None,
        rng: RandomSource,
        world: WorldConfig,
        slot: int,
    ) -> Biot | None:
        """Advance this biot by one tick and return its offspring, if any.

        ``index`` must have been built from positions taken before any biot
        moved this tick; ``slot`` is this biot's entry in it.
        """
        offspring = None
        if self.weight > 0.0 and self.life >= ADULT_FACTOR * self.base_life:
            if not self.crowded(index, slot):
                offspring = self.spawn(rng)
                self.life = (ADULT_FACTOR - 1.0) * self.base_life

        self.position = wrap_position(
            vec.add(self.position, self.velocity), world.width, world.height
        )
        self.velocity = apply_drag(self.velocity, DRAG)
        self.life += (self.photosynthesis - self.metabolism) * ENERGY_RATE

        # One draw per tick regardless of traits.
        if rng.random() < MOVE_CHANCE * self.motion and self.weight > 0.0:
            speed = MOVE_FORCE * self.motion / self.weight
            if self.intelligence > 0.0 and feed_dir is not None:
                self.accelerate(feed_dir, speed)
            else:
                self.random_move(rng, speed)

        self.age += 1
        return offspring


def stronger(a: Biot, b: Biot) -> bool:
    """Whether ``a`` overpowers ``b``. Never true in both directions."""
    return a.attack > b.attack + b.defense * DEFENSE_FACTOR
