import pytest

from clothsim.forces import GravityForce, PointerDragForce
from clothsim.integrators import VerletIntegrator
from clothsim.primitives import Point, HORIZONTAL_SLOT, VERTICAL_SLOT
from clothsim.vector import Vector2


def test_new_point_is_at_rest():
    point = Point((3.0, 4.0))
    assert point.position == point.prev_position == point.initial_position == Vector2(3.0, 4.0)
    assert point.sticks == [None, None]
    assert not point.pinned


def test_add_stick_overwrites_slot():
    point = Point((0.0, 0.0))
    point.add_stick(1, HORIZONTAL_SLOT)
    point.add_stick(2, HORIZONTAL_SLOT)
    point.add_stick(3, VERTICAL_SLOT)
    assert point.sticks == [2, 3]
    with pytest.raises(ValueError):
        point.add_stick(4, 2)


def test_break_sticks_empties_both_slots():
    point = Point((0.0, 0.0))
    point.add_stick(7, VERTICAL_SLOT)
    assert point.break_sticks() == [7]
    assert point.sticks == [None, None]
    assert point.break_sticks() == []


def test_clear_stick_only_matching_slot():
    point = Point((0.0, 0.0))
    point.add_stick(1, HORIZONTAL_SLOT)
    point.add_stick(2, VERTICAL_SLOT)
    assert point.clear_stick(2)
    assert point.sticks == [1, None]
    assert not point.clear_stick(5)


def test_two_verlet_steps_match_closed_form():
    integrator = VerletIntegrator(drag=0.05)
    gravity = GravityForce().acceleration()
    point = Point((0.0, 0.0))
    dt = 0.1

    integrator.integrate_point(point, gravity, dt)
    first = 981.0 * 0.95 * dt * dt
    assert point.position.y == pytest.approx(first)
    assert point.prev_position == Vector2(0.0, 0.0)

    integrator.integrate_point(point, gravity, dt)
    assert point.position.y == pytest.approx(first + first * 0.95 + first)
    assert point.position.x == 0.0


def test_pinned_point_snaps_to_anchor():
    integrator = VerletIntegrator()
    point = Point((5.0, 5.0), pinned=True)
    point.position = Vector2(9.0, 9.0)
    integrator.integrate_point(point, Vector2(0.0, 981.0), 0.1)
    assert point.position == Vector2(5.0, 5.0)


def test_invalid_drag():
    with pytest.raises(ValueError):
        VerletIntegrator(drag=1.0)


def test_pointer_drag_force_clamps_each_axis():
    force = PointerDragForce(limit=10.0)
    accel = force.acceleration(Vector2(50.0, 3.0), Vector2(0.0, 5.0))
    assert accel == Vector2(10.0 * 10000.0, -2.0 * 10000.0)
