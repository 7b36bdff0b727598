import math

import pytest

from apollonian.circle import Circle
from apollonian.descartes import center_numerators, complex_descartes, descartes_curvatures, solve


def _descartes_residual(k1, k2, k3, k4):
    """(k1+k2+k3+k4)^2 - 2(k1^2+k2^2+k3^2+k4^2), zero for tangent quadruples."""
    return (k1 + k2 + k3 + k4) ** 2 - 2 * (k1 * k1 + k2 * k2 + k3 * k3 + k4 * k4)


def test_curvatures_of_tangent_triplet(tangent_triplet):
    k4a, k4b = descartes_curvatures(*tangent_triplet)
    assert k4a == pytest.approx(0.06)
    assert k4b == pytest.approx(0.02)


def test_curvatures_satisfy_descartes_equation(tangent_triplet):
    ks = [c.bend for c in tangent_triplet]
    for k4 in descartes_curvatures(*tangent_triplet):
        assert _descartes_residual(*ks, k4) == pytest.approx(0.0, abs=1e-12)


def test_collinear_seed_has_double_root():
    # Bounding circle with two inner circles on a diameter: radicand is zero
    outer = Circle.from_xy(-1 / 200, 200.0, 200.0)
    c2 = Circle.from_xy(1 / 120, 280.0, 200.0)
    c3 = Circle.from_xy(1 / 80, 80.0, 200.0)
    k4a, k4b = descartes_curvatures(outer, c2, c3)
    assert k4a == pytest.approx(k4b, abs=1e-6)
    for k4 in (k4a, k4b):
        assert _descartes_residual(outer.bend, c2.bend, c3.bend, k4) == pytest.approx(0.0, abs=1e-9)


class TestComplexDescartes:
    """Candidate centers from the complex form of the theorem."""

    def test_four_candidates_in_order(self, tangent_triplet):
        candidates = solve(tangent_triplet)
        assert len(candidates) == 4
        expected = [
            (0.06, 50.0, 200.0 / 3.0),
            (0.06, -50.0 / 3.0, 0.0),
            (0.02, 150.0, 200.0),
            (0.02, -50.0, 0.0),
        ]
        for c, (bend, x, y) in zip(candidates, expected):
            assert c.bend == pytest.approx(bend)
            assert c.x == pytest.approx(x, abs=1e-9)
            assert c.y == pytest.approx(y, abs=1e-9)

    def test_numerators(self, tangent_triplet):
        plus, minus = center_numerators(*tangent_triplet)
        assert (plus.a, plus.b) == pytest.approx((3.0, 4.0))
        assert (minus.a, minus.b) == pytest.approx((-1.0, 0.0), abs=1e-12)

    def test_depth_is_stamped(self, tangent_triplet):
        assert {c.depth for c in solve(tangent_triplet, depth=4)} == {4}

    def test_zero_curvature_pair_is_dropped(self):
        # Curvatures 4, 1, 1: the second solution is the straight line k4 = 0
        small = Circle.from_xy(4.0, 0.0, 0.75)
        left = Circle.from_xy(1.0, -1.0, 0.0)
        right = Circle.from_xy(1.0, 1.0, 0.0)
        k4 = descartes_curvatures(small, left, right)
        assert k4 == (12.0, 0.0)
        candidates = complex_descartes(small, left, right, k4)
        assert len(candidates) == 2
        assert all(c.bend == 12.0 for c in candidates)

    def test_near_zero_curvature_is_dropped(self):
        small = Circle.from_xy(0.04, 0.0, 75.0)
        left = Circle.from_xy(0.01, -100.0, 0.0)
        right = Circle.from_xy(0.01, 100.0, 0.0)
        candidates = solve((small, left, right))
        assert len(candidates) == 2
        assert all(c.bend == pytest.approx(0.12) for c in candidates)

    def test_non_finite_curvatures_are_dropped(self, tangent_triplet):
        assert complex_descartes(*tangent_triplet, (math.nan, math.inf)) == []
        kept = complex_descartes(*tangent_triplet, (math.nan, 0.06))
        assert [c.bend for c in kept] == [0.06, 0.06]
