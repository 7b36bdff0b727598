"""Descartes' circle theorem, real and complex forms.

Given three mutually tangent circles with curvatures k1, k2, k3 the two
circles tangent to all of them have curvature

    k4 = k1 + k2 + k3 ± 2√(k1k2 + k2k3 + k3k1)

and, writing each center as a complex number z, the complex form of the
theorem gives their centers

    z4 = (k1z1 + k2z2 + k3z3 ± 2√(k1k2z1z2 + k2k3z2z3 + k1k3z1z3)) / k4

The sign in the center equation is not tied to the sign in the curvature
equation, so every triplet yields four candidates. Only some of them are
actually tangent; picking those out is the validator's job.

See https://en.wikipedia.org/wiki/Descartes%27_theorem
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from .circle import Circle, Triplet
from .complexnum import Complex
from .settings import EPS_BEND

log = logging.getLogger("apollonian.descartes")


def descartes_curvatures(c1: Circle, c2: Circle, c3: Circle) -> Tuple[float, float]:
    """Return the two curvatures of a circle tangent to ``c1``, ``c2``, ``c3``.

    The radicand is taken in absolute value. For a tangent triplet it is
    never negative in exact arithmetic, and the ``abs`` absorbs the small
    negative values float rounding produces around zero.
    """
    k1, k2, k3 = c1.bend, c2.bend, c3.bend
    total = k1 + k2 + k3
    product = abs(k1 * k2 + k2 * k3 + k1 * k3)
    root = 2 * math.sqrt(product)
    return total + root, total - root


def _usable_bend(k: float) -> bool:
    return math.isfinite(k) and abs(k) > EPS_BEND


def complex_descartes(
    c1: Circle,
    c2: Circle,
    c3: Circle,
    curvatures: Sequence[float],
    depth: int = 0,
) -> List[Circle]:
    """Build the candidate circles for the given pair of curvatures.

    Candidates come out in the order (k4a, S+R), (k4a, S-R), (k4b, S+R),
    (k4b, S-R). A candidate whose curvature is zero or not finite, or whose
    center is not finite, is dropped instead of constructed; for regular
    input the list always has four entries.
    """
    numerators = center_numerators(c1, c2, c3)

    candidates: List[Circle] = []
    for k4 in curvatures:
        if not _usable_bend(k4):
            log.debug("dropping candidates with degenerate curvature %r", k4)
            continue
        for numerator in numerators:
            center = numerator.scale(1 / k4)
            if not center.is_finite():
                log.debug("dropping candidate with bend %r: non-finite center", k4)
                continue
            candidates.append(Circle(k4, center, depth))
    return candidates


def solve(triplet: Triplet, depth: int = 0) -> List[Circle]:
    """Return the candidate circles for a tangent triplet."""
    c1, c2, c3 = triplet
    k4 = descartes_curvatures(c1, c2, c3)
    return complex_descartes(c1, c2, c3, k4, depth)


def center_numerators(c1: Circle, c2: Circle, c3: Circle) -> Tuple[Complex, Complex]:
    """Return ``S + R`` and ``S - R``, the center equation before dividing by k4."""
    zk1 = c1.center.scale(c1.bend)
    zk2 = c2.center.scale(c2.bend)
    zk3 = c3.center.scale(c3.bend)
    total = zk1.add(zk2).add(zk3)

    root = zk1.mult(zk2).add(zk2.mult(zk3)).add(zk1.mult(zk3))
    root = root.sqrt().scale(2)
    return total.add(root), total.sub(root)


__all__ = ["descartes_curvatures", "complex_descartes", "solve", "center_numerators"]
