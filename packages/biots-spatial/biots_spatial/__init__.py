"""biots-spatial - Per-tick point indexing for proximity queries."""
from __future__ import annotations

from biots_spatial.types import PointIndex, TreePoint
from biots_spatial.pointgrid import PointGrid

__all__ = [
    "PointGrid",
    "PointIndex",
    "TreePoint",
]
