import pytest

from clothsim import Cloth, ClothEngine, PointerState
from clothsim.vector import Vector2


@pytest.fixture
def engine():
    engine = ClothEngine(dt=1 / 60)
    engine.add_cloth(Cloth(4, 4, 20, 0, 0, 1.0))
    engine.add_cloth(Cloth(4, 4, 20, 200, 0, 1.0))
    return engine


def test_invalid_dt():
    with pytest.raises(ValueError):
        ClothEngine(dt=0)


def test_step_advances_every_cloth(engine):
    engine.step()
    assert engine.frame_count == 1
    assert engine.time == pytest.approx(1 / 60)
    for cloth in engine.cloths:
        assert any(point.position != point.initial_position for point in cloth.points)


def test_previous_pointer_is_tracked(engine):
    assert engine.prev_pointer_position == Vector2.ZERO
    engine.step(PointerState.at((500.0, 500.0)))
    assert engine.prev_pointer_position == Vector2(500.0, 500.0)
    engine.step()
    assert engine.prev_pointer_position == Vector2(500.0, 500.0)


def test_drag_uses_stored_previous_pointer(engine):
    cloth = engine.cloths[0]
    target = cloth.get_point(1, 2)
    engine.step(PointerState.at(target.position))
    start = target.position
    engine.step(PointerState.at(target.position + Vector2(0.5, 0.0), left_down=True))
    assert target.position.x > start.x


def test_tear_only_affects_cloth_under_pointer(engine):
    first, second = engine.cloths
    removed = engine.step(PointerState.at(first.get_point(1, 1).position, right_down=True))
    assert removed == 2
    assert len(first.sticks) == 22
    assert len(second.sticks) == 24


def test_paused_engine_does_not_advance(engine):
    engine.pause()
    assert engine.step() == 0
    assert engine.frame_count == 0
    engine.resume()
    engine.step_n(3)
    assert engine.frame_count == 3


def test_remove_cloth_and_render_data(engine):
    assert len(engine.render_data()) == 48
    assert engine.remove_cloth(engine.cloths[0])
    assert not engine.remove_cloth(Cloth(2, 2, 10, 0, 0, 1.0))
    assert len(engine.render_data()) == 24
    info = engine.get_debug_info()
    assert info['cloth_count'] == 1
    assert info['stick_count'] == 24


def test_large_dt_is_logged(engine, caplog):
    with caplog.at_level("WARNING", logger="clothsim.engine"):
        engine.step(dt=0.5)
    assert "exceeds" in caplog.text
