"""Perception: pick a feeding direction for biots that can think."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from biots_physics import vec

from biots_life.biot import stronger

if TYPE_CHECKING:
    from biots_spatial import PointIndex

    from biots_life.biot import Biot

PERCEPTION_SCALE = 40.0


def perception_range_2(biot: Biot) -> float:
    reach = PERCEPTION_SCALE * biot.intelligence
    return reach * reach


def feeding_direction(
    biots: Sequence[Biot], index: PointIndex, slot: int
) -> vec.Vec | None:
    """Unit vector from ``biots[slot]`` toward the nearest biot it can eat.

    Neighbors come from ``index`` (pre-tick positions) nearest first; the
    scan stops at the perception range or at the first weaker neighbor.
    A weaker neighbor sitting exactly on top of the biot gives no direction.
    """
    biot = biots[slot]
    if biot.intelligence <= 0.0:
        return None
    x, y = biot.position
    reach_2 = perception_range_2(biot)
    for point, d2 in index.nearest_iter_with_distance_2(x, y):
        if point.idx == slot:
            continue
        if d2 > reach_2:
            break
        if stronger(biot, biots[point.idx]):
            if d2 == 0.0:
                return None
            return vec.normalize((point.x - x, point.y - y))
    return None
