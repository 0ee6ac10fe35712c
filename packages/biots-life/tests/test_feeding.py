"""Tests for feeding-direction detection."""
from __future__ import annotations

import pytest

from biots_spatial import PointGrid, TreePoint

from biots_life.biot import Biot
from biots_life.feeding import feeding_direction, perception_range_2

HUNTER = "aaaainnnnnnnn"    # attack 0.4, intelligence 10
PREY = "pnnnnnnnnnnnn"
TURTLE = "ddddddnnnnnnn"    # defense 0.6


def _setup(*biots: Biot) -> tuple[list[Biot], PointGrid]:
    index = PointGrid.bulk_load(
        TreePoint(b.position[0], b.position[1], n) for n, b in enumerate(biots)
    )
    return list(biots), index


def test_perception_range_scales_with_intelligence() -> None:
    assert perception_range_2(Biot(genome=HUNTER)) == pytest.approx(400.0 ** 2)
    assert perception_range_2(Biot(genome="aaaaiinnnnnnn")) == pytest.approx(800.0 ** 2)


def test_unintelligent_biot_has_no_direction() -> None:
    biots, index = _setup(
        Biot(genome="aaaannnnnnnnn", position=(100.0, 100.0)),
        Biot(genome=PREY, position=(120.0, 100.0)),
    )
    assert feeding_direction(biots, index, 0) is None


def test_points_at_weaker_neighbor() -> None:
    biots, index = _setup(
        Biot(genome=HUNTER, position=(100.0, 100.0)),
        Biot(genome=PREY, position=(100.0, 130.0)),
    )
    assert feeding_direction(biots, index, 0) == pytest.approx((0.0, 1.0))


def test_skips_neighbors_it_cannot_beat() -> None:
    biots, index = _setup(
        Biot(genome=HUNTER, position=(100.0, 100.0)),
        Biot(genome=TURTLE, position=(110.0, 100.0)),
        Biot(genome=PREY, position=(70.0, 100.0)),
    )
    assert feeding_direction(biots, index, 0) == pytest.approx((-1.0, 0.0))


def test_takes_nearest_weaker_neighbor() -> None:
    biots, index = _setup(
        Biot(genome=HUNTER, position=(100.0, 100.0)),
        Biot(genome=PREY, position=(100.0, 300.0)),
        Biot(genome=PREY, position=(160.0, 180.0)),
    )
    assert feeding_direction(biots, index, 0) == pytest.approx((0.6, 0.8))


def test_prey_beyond_perception_ignored() -> None:
    biots, index = _setup(
        Biot(genome=HUNTER, position=(0.0, 0.0)),
        Biot(genome=PREY, position=(401.0, 0.0)),
    )
    assert feeding_direction(biots, index, 0) is None


def test_coincident_prey_gives_no_direction() -> None:
    biots, index = _setup(
        Biot(genome=HUNTER, position=(50.0, 50.0)),
        Biot(genome=PREY, position=(50.0, 50.0)),
        Biot(genome=PREY, position=(60.0, 50.0)),
    )
    assert feeding_direction(biots, index, 0) is None


def test_uses_indexed_positions() -> None:
    hunter = Biot(genome=HUNTER, position=(100.0, 100.0))
    prey = Biot(genome=PREY, position=(130.0, 100.0))
    biots, index = _setup(hunter, prey)
    # Moving the prey after the index is built does not change what is seen.
    prey.position = (70.0, 100.0)
    assert feeding_direction(biots, index, 0) == pytest.approx((1.0, 0.0))
