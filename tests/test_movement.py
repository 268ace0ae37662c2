import pytest

from duckjam.movement import (
    SCREEN_WRAP_MARGIN,
    MovementController,
    apply_movement,
    wrap_position,
)

WINDOW = (800.0, 600.0)


def test_default_controller():
    controller = MovementController()
    assert controller.intent == (0.0, 0.0)
    assert controller.max_speed == 400.0


def test_no_intent_keeps_position():
    controller = MovementController()
    assert apply_movement(controller, (3.0, -4.0), 1.0) == (3.0, -4.0)


def test_movement_scales_with_time():
    controller = MovementController(intent=(1.0, 0.0), max_speed=10.0)
    once = apply_movement(controller, (0.0, 0.0), 1.0)
    twice = apply_movement(controller, once, 1.0)
    assert twice[0] == pytest.approx(2 * once[0])
    assert once[1] == 0.0


def test_opposite_intents_cancel():
    forward = MovementController(intent=(0.6, 0.8))
    back = MovementController(intent=(-0.6, -0.8))
    start = (5.0, 7.0)
    moved = apply_movement(back, apply_movement(forward, start, 0.25), 0.25)
    assert moved == pytest.approx(start)


def test_wrap_keeps_inside_positions():
    assert wrap_position((10.0, -20.0), WINDOW) == pytest.approx((10.0, -20.0))


@pytest.mark.parametrize("point", [(1000.0, 0.0), (-700.0, 450.0), (5000.0, -5000.0)])
def test_wrap_lands_within_padded_window(point):
    x, y = wrap_position(point, WINDOW)
    half_w = (WINDOW[0] + SCREEN_WRAP_MARGIN) / 2
    half_h = (WINDOW[1] + SCREEN_WRAP_MARGIN) / 2
    assert -half_w <= x < half_w
    assert -half_h <= y < half_h


def test_wrap_is_periodic():
    size_x = WINDOW[0] + SCREEN_WRAP_MARGIN
    size_y = WINDOW[1] + SCREEN_WRAP_MARGIN
    point = (123.0, -45.0)
    shifted = (point[0] + 3 * size_x, point[1] - 2 * size_y)
    assert wrap_position(shifted, WINDOW) == pytest.approx(wrap_position(point, WINDOW))