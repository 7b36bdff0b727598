import math

import pytest

from apollonian.circle import Circle
from apollonian.complexnum import Complex
from apollonian.errors import DegenerateCircleError


@pytest.mark.parametrize("bend", [1.0, -1.0 / 200, 0.03, 1.0 / 3.0, -7.25, 1e-9, 1e9])
def test_radius_is_abs_reciprocal(bend):
    c = Circle(bend, Complex(1.0, 2.0))
    assert c.radius == abs(1 / bend)


def test_from_xy_and_accessors():
    c = Circle.from_xy(-0.005, 200.0, 150.0)
    assert c.center == Complex(200.0, 150.0)
    assert (c.x, c.y) == (200.0, 150.0)
    assert c.radius == pytest.approx(200.0)
    assert c.is_bounding
    assert c.depth == 0
    assert not Circle.from_xy(0.01, 0.0, 0.0).is_bounding


def test_distance_to():
    a = Circle.from_xy(1.0, 0.0, 0.0)
    b = Circle.from_xy(1.0, 3.0, 4.0)
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0


@pytest.mark.parametrize("bend", [0.0, 1e-15, float("nan"), float("inf")])
def test_degenerate_bend_rejected(bend):
    with pytest.raises(DegenerateCircleError):
        Circle(bend, Complex(0.0, 0.0))


def test_non_finite_center_rejected():
    with pytest.raises(DegenerateCircleError):
        Circle.from_xy(1.0, math.nan, 0.0)
    with pytest.raises(ValueError):
        Circle.from_xy(1.0, 0.0, math.inf)


def test_identity_semantics():
    a = Circle.from_xy(0.5, 1.0, 1.0)
    b = Circle.from_xy(0.5, 1.0, 1.0)
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_with_depth_copies():
    a = Circle.from_xy(0.5, 1.0, 1.0)
    b = a.with_depth(3)
    assert b is not a
    assert b.depth == 3 and a.depth == 0
    assert (b.bend, b.center, b.radius) == (a.bend, a.center, a.radius)
