import math

import pytest

from clothsim.constraints import Stick
from clothsim.primitives import Point
from clothsim.vector import Vector2


def make_points(a, b):
    return [Point(a), Point(b)]


def test_negative_elasticity_rejected():
    with pytest.raises(ValueError):
        Stick(0, 0, 1, 10.0, -0.1)
    Stick(0, 0, 1, 10.0, 0.0)


@pytest.mark.parametrize("end", [(14.0, 0.0), (6.0, 0.0), (3.0, 4.0), (0.5, 0.1)])
def test_correction_moves_toward_rest_length(end):
    points = make_points((0.0, 0.0), end)
    stick = Stick(0, 0, 1, 10.0, 1.0)
    before = stick.current_length(points)
    stick.apply_constraint(points)
    after = stick.current_length(points)
    assert abs(after - 10.0) < abs(before - 10.0)


def test_correction_is_split_evenly():
    points = make_points((0.0, 0.0), (14.0, 0.0))
    Stick(0, 0, 1, 10.0, 1.0).apply_constraint(points)
    assert points[0].position.x == pytest.approx(2.0)
    assert points[1].position.x == pytest.approx(12.0)


def test_breaks_when_stretched_past_elasticity():
    points = make_points((0.0, 0.0), (25.0, 0.0))
    stick = Stick(0, 0, 1, 10.0, 1.0)
    stick.apply_constraint(points)
    assert stick.broken
    # Correction still applied on the breaking frame
    assert points[1].position.x < 25.0


def test_exactly_max_length_does_not_break():
    points = make_points((0.0, 0.0), (20.0, 0.0))
    stick = Stick(0, 0, 1, 10.0, 1.0)
    stick.apply_constraint(points)
    assert not stick.broken


def test_coincident_points_stay_finite():
    points = make_points((5.0, 5.0), (5.0, 5.0))
    stick = Stick(0, 0, 1, 10.0, 1.0)
    stick.apply_constraint(points)
    assert points[0].position == Vector2(5.0, 5.0)
    assert all(math.isfinite(c) for p in points for c in p.position)
    assert not stick.broken


def test_constraint_info():
    info = Stick(3, 0, 1, 10.0, 0.5).get_constraint_info()
    assert info['id'] == 3
    assert info['broken'] is False
