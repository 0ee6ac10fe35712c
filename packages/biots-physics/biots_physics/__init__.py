"""biots-physics - 2D vector math and toroidal kinematics for the biots engine."""
from __future__ import annotations

from biots_physics import vec
from biots_physics.torus import apply_drag, impulse, random_direction, wrap, wrap_position

__all__ = [
    "apply_drag",
    "impulse",
    "random_direction",
    "vec",
    "wrap",
    "wrap_position",
]
