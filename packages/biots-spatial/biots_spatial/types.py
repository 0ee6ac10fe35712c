"""Shared types and protocols for biots-spatial."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol


@dataclass(frozen=True, slots=True)
class TreePoint:
    """A position tagged with the slot of the entity it was taken from."""

    x: float
    y: float
    idx: int


class PointIndex(Protocol):
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[TreePoint]: ...
    def nearest_iter_with_distance_2(
        self, x: float, y: float
    ) -> Iterator[tuple[TreePoint, float]]: ...
    def locate_within_distance(
        self, x: float, y: float, radius: float
    ) -> list[TreePoint]: ...
