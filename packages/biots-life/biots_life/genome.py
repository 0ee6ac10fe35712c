"""Genome encoding and the genome-to-trait model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biots import RandomSource

ATTACK = "a"
DEFENSE = "d"
PHOTOSYNTHESIS = "p"
MOTION = "m"
NOOP = "n"
INTELLIGENCE = "i"

# Three no-op entries: a uniform draw is silent 3 times in 8.
ALPHABET = (ATTACK, DEFENSE, PHOTOSYNTHESIS, MOTION, NOOP, NOOP, NOOP, INTELLIGENCE)
GENOME_LENGTH = 13

BODY_SCALE = 0.1
INTELLIGENCE_SCALE = 10.0


@dataclass(frozen=True, slots=True)
class Traits:
    attack: float = 0.0
    defense: float = 0.0
    photosynthesis: float = 0.0
    motion: float = 0.0
    intelligence: float = 0.0

    @property
    def weight(self) -> float:
        return self.attack + self.defense + self.photosynthesis + self.motion

    @property
    def base_life(self) -> float:
        return 8.0 * self.weight

    @property
    def metabolism(self) -> float:
        return 0.2 * (
            4.5 * self.attack
            + 2.3 * self.defense
            + 2.5 * self.motion
            + 0.1 * self.intelligence
        )


def derive_traits(genome: str) -> Traits:
    return Traits(
        attack=genome.count(ATTACK) * BODY_SCALE,
        defense=genome.count(DEFENSE) * BODY_SCALE,
        photosynthesis=genome.count(PHOTOSYNTHESIS) * BODY_SCALE,
        motion=genome.count(MOTION) * BODY_SCALE,
        intelligence=genome.count(INTELLIGENCE) * INTELLIGENCE_SCALE,
    )


def random_symbol(rng: RandomSource) -> str:
    return ALPHABET[rng.randrange(len(ALPHABET))]


def random_genome(rng: RandomSource, length: int = GENOME_LENGTH) -> str:
    return "".join(random_symbol(rng) for _ in range(length))


def mutate(genome: str, rng: RandomSource) -> str:
    """Replace one uniformly chosen locus with a uniformly chosen symbol.

    The locus is drawn before the symbol. Traits are not touched here;
    callers re-derive them from the returned genome.
    """
    locus = rng.randrange(len(genome))
    symbol = random_symbol(rng)
    return genome[:locus] + symbol + genome[locus + 1:]
