import pytest

from apollonian.circle import Circle


@pytest.fixture
def tangent_triplet():
    """Bounding circle of radius 100 with circles of radius 50 and 100/3 inside.

    Curvatures (-1, 2, 3) scaled by 1/100; the fourth circles have
    curvatures 6/100 and 2/100.
    """
    outer = Circle.from_xy(-0.01, 0.0, 0.0)
    c2 = Circle.from_xy(0.02, 50.0, 0.0)
    c3 = Circle.from_xy(0.03, 0.0, 200.0 / 3.0)
    return outer, c2, c3
