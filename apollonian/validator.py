"""Acceptance tests for candidate circles."""

from __future__ import annotations

from typing import Iterable

from .circle import Circle


def is_tangent(c1: Circle, c2: Circle, epsilon: float) -> bool:
    """Return True if the circles touch externally or one inside the other."""
    d = c1.distance_to(c2)
    r1 = c1.radius
    r2 = c2.radius
    external = abs(d - (r1 + r2)) < epsilon
    internal = abs(d - abs(r2 - r1)) < epsilon
    return external or internal


def is_duplicate(candidate: Circle, known: Iterable[Circle], epsilon: float) -> bool:
    """Return True if a known circle has nearly the same center and radius."""
    for other in known:
        if candidate.distance_to(other) < epsilon and abs(candidate.radius - other.radius) < epsilon:
            return True
    return False


def validate(
    candidate: Circle,
    c1: Circle,
    c2: Circle,
    c3: Circle,
    known: Iterable[Circle],
    epsilon: float,
    min_radius: float,
) -> bool:
    """Decide whether ``candidate`` joins the gasket.

    Args:
        candidate: Circle proposed by the Descartes solver.
        c1, c2, c3: The triplet the candidate was solved from.
        known: Circles accepted so far, or the subset of them near the
            candidate.
        epsilon: Tolerance for the duplicate and tangency checks.
        min_radius: Size floor; smaller circles end the recursion.

    Returns:
        bool: True if the candidate is large enough, new, and tangent to
        all three parents.
    """
    if candidate.radius < min_radius:
        return False
    if is_duplicate(candidate, known, epsilon):
        return False
    return (
        is_tangent(candidate, c1, epsilon)
        and is_tangent(candidate, c2, epsilon)
        and is_tangent(candidate, c3, epsilon)
    )


__all__ = ["is_tangent", "is_duplicate", "validate"]
