"""Tests for N-dimensional vector math helpers."""
from __future__ import annotations

import math

import pytest

from biots_physics import vec


class TestAdd:
    def test_2d(self) -> None:
        assert vec.add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)

    def test_mismatched_dimensions_raises(self) -> None:
        with pytest.raises(ValueError):
            vec.add((1.0, 2.0), (3.0, 4.0, 5.0))


class TestSub:
    def test_2d(self) -> None:
        assert vec.sub((5.0, 3.0), (1.0, 2.0)) == (4.0, 1.0)


class TestScale:
    def test_scale_up(self) -> None:
        assert vec.scale((1.0, 2.0), 3.0) == (3.0, 6.0)

    def test_scale_negative(self) -> None:
        assert vec.scale((1.0, -2.0), -1.0) == (-1.0, 2.0)


class TestMagnitude:
    def test_3_4_5(self) -> None:
        assert vec.magnitude((3.0, 4.0)) == 5.0
        assert vec.magnitude_sq((3.0, 4.0)) == 25.0

    def test_zero(self) -> None:
        assert vec.magnitude((0.0, 0.0)) == 0.0


class TestNormalize:
    def test_unit_vector_unchanged(self) -> None:
        assert vec.normalize((1.0, 0.0)) == (1.0, 0.0)

    def test_diagonal(self) -> None:
        x, y = vec.normalize((3.0, 3.0))
        assert x == pytest.approx(1.0 / math.sqrt(2.0))
        assert y == pytest.approx(1.0 / math.sqrt(2.0))

    def test_zero_vector_passthrough(self) -> None:
        assert vec.normalize((0.0, 0.0)) == (0.0, 0.0)


class TestDistance:
    def test_distance(self) -> None:
        assert vec.distance((0.0, 0.0), (3.0, 4.0)) == 5.0
