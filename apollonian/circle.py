"""Circles described by a signed curvature and a complex center."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from .complexnum import Complex
from .errors import DegenerateCircleError
from .settings import EPS_BEND


@dataclass(frozen=True, eq=False)
class Circle:
    """Circle with curvature, complex center and generation depth.

    ``bend`` is the signed curvature 1/radius; it is negative for the
    bounding circle, whose interior is the outside. Circles compare by
    identity, so two solutions that happen to coincide numerically stay
    distinct objects.
    """

    bend: float
    center: Complex
    depth: int = 0  # generation that produced the circle, 0 for seeds
    radius: float = field(init=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.bend) or abs(self.bend) <= EPS_BEND:
            raise DegenerateCircleError(f"unusable bend {self.bend!r}")
        if not self.center.is_finite():
            raise DegenerateCircleError(f"non-finite center {self.center!r}")
        object.__setattr__(self, "radius", abs(1 / self.bend))

    @classmethod
    def from_xy(cls, bend: float, x: float, y: float, depth: int = 0) -> "Circle":
        return cls(bend, Complex(x, y), depth)

    @property
    def x(self) -> float:
        return self.center.a

    @property
    def y(self) -> float:
        return self.center.b

    @property
    def is_bounding(self) -> bool:
        """True for the enclosing circle (negative bend)."""
        return self.bend < 0

    def distance_to(self, other: "Circle") -> float:
        """Euclidean distance between the two centers."""
        return math.hypot(self.center.a - other.center.a, self.center.b - other.center.b)

    def with_depth(self, depth: int) -> "Circle":
        return Circle(self.bend, self.center, depth)

    def __repr__(self) -> str:
        return (
            f"Circle(bend={self.bend:.6g}, center=({self.x:.6g}, {self.y:.6g}), "
            f"radius={self.radius:.6g}, depth={self.depth})"
        )


# Three pairwise tangent circles awaiting expansion
Triplet = Tuple[Circle, Circle, Circle]

__all__ = ["Circle", "Triplet"]
