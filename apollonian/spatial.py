"""Uniform grid over circle centers.

The duplicate check only cares about circles whose centers lie within
epsilon of the candidate. Bucketing centers into square cells at least that
wide means those circles always sit in the candidate's cell or one of its
eight neighbours, so scanning the 3x3 block gives the same answer as
scanning every circle.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .circle import Circle

Cell = Tuple[int, int]


class CircleGrid:
    """Mutable bucket map from grid cell to the circles centered in it."""

    def __init__(self, cell_size: float, circles: Optional[Iterable[Circle]] = None) -> None:
        if not cell_size > 0 or not math.isfinite(cell_size):
            raise ValueError("cell_size must be positive and finite")
        self.cell_size = float(cell_size)
        self._cells: Dict[Cell, List[Circle]] = {}
        self._count = 0
        if circles is not None:
            self.extend(circles)

    def cell_of(self, circle: Circle) -> Cell:
        return (
            math.floor(circle.center.a / self.cell_size),
            math.floor(circle.center.b / self.cell_size),
        )

    def add(self, circle: Circle) -> None:
        self._cells.setdefault(self.cell_of(circle), []).append(circle)
        self._count += 1

    def extend(self, circles: Iterable[Circle]) -> None:
        for c in circles:
            self.add(c)

    def near(self, circle: Circle) -> Iterator[Circle]:
        """Yield every stored circle in the 3x3 block around ``circle``."""
        cx, cy = self.cell_of(circle)
        for ix in (cx - 1, cx, cx + 1):
            for iy in (cy - 1, cy, cy + 1):
                bucket = self._cells.get((ix, iy))
                if bucket:
                    yield from bucket

    def copy(self) -> "CircleGrid":
        other = CircleGrid(self.cell_size)
        other._cells = {cell: list(bucket) for cell, bucket in self._cells.items()}
        other._count = self._count
        return other

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Circle]:
        for bucket in self._cells.values():
            yield from bucket


__all__ = ["CircleGrid"]
