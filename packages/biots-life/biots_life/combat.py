"""End-of-tick combat between nearby biots."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

from biots_physics import vec

from biots_life.biot import stronger

if TYPE_CHECKING:
    from biots_spatial import PointIndex

    from biots_life.biot import Biot

COMBAT_RADIUS = 50.0
REACH_PER_WEIGHT = 10.0
FEED_EFFICIENCY = 0.8


def combat_pairs(
    index: PointIndex, radius: float = COMBAT_RADIUS
) -> Iterator[tuple[int, int]]:
    """Yield every unordered pair of entries within ``radius`` exactly once.

    Pairs come out as ``(i, j)`` with ``i < j``, grouped by ``i`` in index
    iteration order.
    """
    for first in index:
        for second in index.locate_within_distance(first.x, first.y, radius):
            if first.idx < second.idx:
                yield first.idx, second.idx


def interact(a: Biot, b: Biot) -> Biot | None:
    """Let the stronger of two touching biots eat the other.

    Returns the loser, or None when they are out of reach or evenly matched.
    """
    reach = REACH_PER_WEIGHT * (a.weight + b.weight)
    if vec.distance(a.position, b.position) >= reach:
        return None
    if stronger(a, b):
        winner, loser = a, b
    elif stronger(b, a):
        winner, loser = b, a
    else:
        return None
    winner.life += loser.life * FEED_EFFICIENCY
    loser.life = 0.0
    return loser


def resolve_combat(
    biots: Sequence[Biot], index: PointIndex, radius: float = COMBAT_RADIUS
) -> int:
    """Run :func:`interact` over all candidate pairs; return the kill count."""
    kills = 0
    for i, j in combat_pairs(index, radius):
        if interact(biots[i], biots[j]) is not None:
            kills += 1
    return kills
