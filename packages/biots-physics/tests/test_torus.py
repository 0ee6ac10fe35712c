"""Tests for toroidal wraparound and impulse helpers."""
from __future__ import annotations

import random

import pytest

from biots_physics import apply_drag, impulse, random_direction, vec, wrap, wrap_position


class TestWrap:
    def test_inside_unchanged(self) -> None:
        assert wrap(10.0, 100.0) == 10.0

    def test_past_far_edge(self) -> None:
        assert wrap(100.999, 100.0) == pytest.approx(0.999)

    def test_negative_input(self) -> None:
        assert wrap(-1.0, 100.0) == pytest.approx(99.0)

    def test_many_widths_negative(self) -> None:
        assert wrap(-250.0, 100.0) == pytest.approx(50.0)

    def test_tiny_negative_stays_below_size(self) -> None:
        result = wrap(-1e-20, 1920.0)
        assert 0.0 <= result < 1920.0

    @pytest.mark.parametrize("value", [-1e9, -3.5, -0.0, 0.0, 1919.9999, 1920.0, 5e6])
    def test_result_always_in_range(self, value: float) -> None:
        assert 0.0 <= wrap(value, 1920.0) < 1920.0


def test_wrap_position_both_axes() -> None:
    x, y = wrap_position((-5.0, 1205.0), 1920.0, 1200.0)
    assert x == pytest.approx(1915.0)
    assert y == pytest.approx(5.0)


def test_apply_drag() -> None:
    assert apply_drag((10.0, -2.0), 0.9) == pytest.approx((9.0, -1.8))


def test_impulse_adds_scaled_direction() -> None:
    assert impulse((1.0, 1.0), (0.0, 1.0), 1.5) == (1.0, 2.5)


def test_random_direction_is_unit_and_deterministic() -> None:
    a = random_direction(random.Random(5))
    b = random_direction(random.Random(5))
    assert a == b
    assert vec.magnitude(a) == pytest.approx(1.0)


def test_random_direction_draws_two_floats() -> None:
    rng = random.Random(9)
    random_direction(rng)
    reference = random.Random(9)
    reference.random()
    reference.random()
    assert rng.random() == reference.random()
