"""System factories wiring a Population into the tick engine."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from biots import Engine

from biots_life.config import WorldConfig
from biots_life.population import Population
from biots_life.stats import census

if TYPE_CHECKING:
    from biots import TickContext

logger = logging.getLogger(__name__)


def make_population_system(
    population: Population,
) -> Callable[[object, "TickContext"], None]:
    """Advance ``population`` one tick with the engine's random source."""

    def population_system(world: object, ctx: TickContext) -> None:
        population.step(ctx.random)

    return population_system


def make_census_system(
    population: Population, every: int = 100,
) -> Callable[[object, "TickContext"], None]:
    """Log a census line every ``every`` ticks."""
    if every <= 0:
        raise ValueError("every must be positive")

    def census_system(world: object, ctx: TickContext) -> None:
        if ctx.tick_number % every == 0:
            logger.info("tick %d: %s", ctx.tick_number, census(population).summary())

    return census_system


def make_extinction_system(
    population: Population,
) -> Callable[[object, "TickContext"], None]:
    """Request an engine stop once no biots remain."""

    def extinction_system(world: object, ctx: TickContext) -> None:
        if len(population) == 0:
            logger.info("Population extinct at tick %d", ctx.tick_number)
            ctx.request_stop()

    return extinction_system


def build_simulation(
    count: int, seed: int, world: WorldConfig | None = None,
) -> tuple[Engine, Population]:
    """Seed an engine, then draw the initial biots from its random source.

    The population system is registered; further systems (census,
    extinction) are up to the caller.
    """
    population = Population(world=world)
    engine = Engine(population, seed=seed)
    population.populate(count, engine.rng)
    engine.add_system(make_population_system(population))
    return engine, population
