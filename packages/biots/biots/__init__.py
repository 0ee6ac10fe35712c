"""biots - A small, seeded tick engine for artificial-life simulations."""

from biots.engine import Engine, entropy_seed
from biots.types import EntropyError, RandomSource, TickContext

__all__ = [
    "Engine",
    "TickContext",
    "RandomSource",
    "EntropyError",
    "entropy_seed",
]
