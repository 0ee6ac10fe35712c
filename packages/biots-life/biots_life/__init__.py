"""biots-life - Genomes, organisms, and population dynamics for biots."""
from __future__ import annotations

from biots_life.biot import Biot, stronger
from biots_life.combat import combat_pairs, interact, resolve_combat
from biots_life.config import WorldConfig
from biots_life.feeding import feeding_direction
from biots_life.genome import ALPHABET, GENOME_LENGTH, Traits, derive_traits, mutate, random_genome
from biots_life.population import (
    BiotView,
    Population,
    TickPhase,
    TickReport,
    create_population,
    population_size,
    step,
)
from biots_life.stats import Census, census
from biots_life.systems import (
    build_simulation,
    make_census_system,
    make_extinction_system,
    make_population_system,
)

__all__ = [
    "ALPHABET",
    "GENOME_LENGTH",
    "Biot",
    "BiotView",
    "Census",
    "Population",
    "TickPhase",
    "TickReport",
    "Traits",
    "WorldConfig",
    "build_simulation",
    "census",
    "combat_pairs",
    "create_population",
    "derive_traits",
    "feeding_direction",
    "interact",
    "make_census_system",
    "make_extinction_system",
    "make_population_system",
    "mutate",
    "population_size",
    "random_genome",
    "resolve_combat",
    "step",
    "stronger",
]
