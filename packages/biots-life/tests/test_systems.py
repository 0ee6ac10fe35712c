"""Tests for engine system factories."""
from __future__ import annotations

import logging
import random

import pytest

from biots import Engine
from biots_life import (
    Population,
    WorldConfig,
    build_simulation,
    create_population,
    make_census_system,
    make_extinction_system,
    make_population_system,
)

WORLD = WorldConfig(width=300.0, height=200.0)


def test_population_system_uses_engine_random() -> None:
    engine_pop = create_population(60, random.Random(1), WORLD)
    manual_pop = create_population(60, random.Random(1), WORLD)

    engine = Engine(engine_pop, seed=5)
    engine.add_system(make_population_system(engine_pop))
    engine.run(10)

    rng = random.Random(5)
    for _ in range(10):
        manual_pop.step(rng)

    assert [(b.genome, b.position) for b in engine_pop.biots] == [
        (b.genome, b.position) for b in manual_pop.biots
    ]


def test_build_simulation_draws_setup_and_ticks_from_one_stream() -> None:
    engine, population = build_simulation(60, seed=9, world=WORLD)
    engine.run(10)

    rng = random.Random(9)
    manual = create_population(60, rng, WORLD)
    for _ in range(10):
        manual.step(rng)

    assert engine.tick_number == 10
    assert [(b.genome, b.position) for b in population.biots] == [
        (b.genome, b.position) for b in manual.biots
    ]


def test_build_simulation_does_not_replay_setup_draws() -> None:
    engine, population = build_simulation(5, seed=4, world=WORLD)
    fresh = random.Random(4)
    assert engine.world is population
    assert len(population) == 5
    assert engine.rng.random() != fresh.random()


def test_build_simulation_rejects_negative_count() -> None:
    with pytest.raises(ValueError, match="count must be >= 0"):
        build_simulation(-1, seed=0, world=WORLD)


def test_extinction_stops_engine() -> None:
    population = Population(world=WORLD)
    engine = Engine(population, seed=0)
    engine.add_system(make_population_system(population))
    engine.add_system(make_extinction_system(population))
    engine.run(50)
    assert engine.tick_number == 1


def test_census_logged_periodically(caplog: pytest.LogCaptureFixture) -> None:
    population = create_population(10, random.Random(2), WORLD)
    engine = Engine(population, seed=3)
    engine.add_system(make_census_system(population, every=2))
    with caplog.at_level(logging.INFO, logger="biots_life.systems"):
        engine.run(5)
    lines = [r.getMessage() for r in caplog.records if r.name == "biots_life.systems"]
    assert len(lines) == 2
    assert lines[0].startswith("tick 2: biots=10")


def test_census_interval_must_be_positive() -> None:
    with pytest.raises(ValueError, match="every must be positive"):
        make_census_system(Population(), every=0)
