"""Kinematics on a bounded plane whose opposite edges are joined."""
from __future__ import annotations

from typing import TYPE_CHECKING

from biots_physics import vec

if TYPE_CHECKING:
    from biots import RandomSource


def wrap(value: float, size: float) -> float:
    """Map ``value`` into ``[0, size)``, negative inputs included."""
    result = value % size
    # Float modulo of a tiny negative number rounds up to ``size`` itself.
    if result >= size:
        return 0.0
    return result


def wrap_position(position: vec.Vec, width: float, height: float) -> vec.Vec:
    x, y = position
    return (wrap(x, width), wrap(y, height))


def apply_drag(velocity: vec.Vec, factor: float) -> vec.Vec:
    return vec.scale(velocity, factor)


def impulse(velocity: vec.Vec, direction: vec.Vec, speed: float) -> vec.Vec:
    return vec.add(velocity, vec.scale(direction, speed))


def random_direction(rng: RandomSource) -> vec.Vec:
    """Unit vector in a random direction.

    Draws exactly two floats so callers keep a fixed draw sequence.
    """
    dx = rng.random() - 0.5
    dy = rng.random() - 0.5
    return vec.normalize((dx, dy))
