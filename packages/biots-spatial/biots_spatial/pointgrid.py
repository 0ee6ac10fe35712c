"""PointGrid - bulk-loaded uniform bucket grid over float positions."""
from __future__ import annotations

import heapq
import itertools
import math
from typing import Iterable, Iterator

from biots_spatial.types import TreePoint

Cell = tuple[int, int]


class PointGrid:
    """Read-only nearest-neighbour and range index over :class:`TreePoint`.

    Built once per tick from a snapshot of positions and never mutated
    afterwards. Distances are planar squared Euclidean distances.
    """

    def __init__(self, cell_size: float = 32.0) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self._cell_size = cell_size
        self._cells: dict[Cell, list[TreePoint]] = {}
        self._points: list[TreePoint] = []
        self._min_cell: Cell = (0, 0)
        self._max_cell: Cell = (0, 0)

    @classmethod
    def bulk_load(
        cls, points: Iterable[TreePoint], cell_size: float = 32.0
    ) -> PointGrid:
        grid = cls(cell_size)
        grid._points = list(points)
        for point in grid._points:
            grid._cells.setdefault(grid._cell_of(point.x, point.y), []).append(point)
        if grid._cells:
            xs = [c[0] for c in grid._cells]
            ys = [c[1] for c in grid._cells]
            grid._min_cell = (min(xs), min(ys))
            grid._max_cell = (max(xs), max(ys))
        return grid

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def bounds(self) -> tuple[Cell, Cell]:
        """Lowest and highest occupied cell coordinates."""
        return self._min_cell, self._max_cell

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TreePoint]:
        return iter(self._points)

    def _cell_of(self, x: float, y: float) -> Cell:
        return (math.floor(x / self._cell_size), math.floor(y / self._cell_size))

    def _ring(self, cx: int, cy: int, r: int) -> Iterator[list[TreePoint]]:
        """Occupied buckets at Chebyshev cell distance exactly ``r``."""
        if r == 0:
            bucket = self._cells.get((cx, cy))
            if bucket:
                yield bucket
            return
        for dx in range(-r, r + 1):
            for dy in (-r, r):
                bucket = self._cells.get((cx + dx, cy + dy))
                if bucket:
                    yield bucket
        for dy in range(-r + 1, r):
            for dx in (-r, r):
                bucket = self._cells.get((cx + dx, cy + dy))
                if bucket:
                    yield bucket

    def _max_ring(self, cx: int, cy: int) -> int:
        return max(
            cx - self._min_cell[0],
            self._max_cell[0] - cx,
            cy - self._min_cell[1],
            self._max_cell[1] - cy,
        )

    def nearest_iter_with_distance_2(
        self, x: float, y: float
    ) -> Iterator[tuple[TreePoint, float]]:
        """Yield ``(point, squared_distance)`` in non-decreasing distance order.

        Rings of cells are scanned lazily outwards. After ring ``r`` has been
        collected, every unseen point is at least ``r * cell_size`` away, so
        candidates closer than that can be released. Ties are broken by
        entry index.
        """
        if not self._points:
            return
        cx, cy = self._cell_of(x, y)
        last = self._max_ring(cx, cy)
        heap: list[tuple[float, int, int, TreePoint]] = []
        order = itertools.count()
        r = 0
        while True:
            for bucket in self._ring(cx, cy, r):
                for point in bucket:
                    d2 = (point.x - x) ** 2 + (point.y - y) ** 2
                    heapq.heappush(heap, (d2, point.idx, next(order), point))
            if r >= last:
                break
            released = (r * self._cell_size) ** 2
            while heap and heap[0][0] <= released:
                d2, _, _, point = heapq.heappop(heap)
                yield point, d2
            r += 1
        while heap:
            d2, _, _, point = heapq.heappop(heap)
            yield point, d2

    def locate_within_distance(
        self, x: float, y: float, radius: float
    ) -> list[TreePoint]:
        """All points with squared distance ``<= radius ** 2``, by entry index."""
        r2 = radius * radius
        lo_x, lo_y = self._cell_of(x - radius, y - radius)
        hi_x, hi_y = self._cell_of(x + radius, y + radius)
        lo_x, lo_y = max(lo_x, self._min_cell[0]), max(lo_y, self._min_cell[1])
        hi_x, hi_y = min(hi_x, self._max_cell[0]), min(hi_y, self._max_cell[1])
        found: list[TreePoint] = []
        for gx in range(lo_x, hi_x + 1):
            for gy in range(lo_y, hi_y + 1):
                for point in self._cells.get((gx, gy), ()):
                    if (point.x - x) ** 2 + (point.y - y) ** 2 <= r2:
                        found.append(point)
        found.sort(key=lambda p: p.idx)
        return found
