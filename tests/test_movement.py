import pytest

from solz.movement import WRAP_MARGIN, MovementController, apply_movement, screen_wrap


def test_default_controller():
    controller = MovementController()
    assert controller.intent == (0.0, 0.0)
    assert controller.max_speed == 400.0


def test_zero_intent_does_not_move():
    start = (3.0, -4.0, 1.0)
    assert apply_movement(start, MovementController(), 1.0) == start


def test_movement_keeps_z():
    moved = apply_movement((0.0, 0.0, 7.0), MovementController(intent=(1.0, 1.0)), 0.1)
    assert moved[2] == 7.0


def test_movement_scales_with_time():
    controller = MovementController(intent=(1.0, -0.5), max_speed=100.0)
    once = apply_movement((0.0, 0.0, 0.0), controller, 0.5)
    twice = apply_movement(once, controller, 0.5)
    direct = apply_movement((0.0, 0.0, 0.0), controller, 1.0)
    assert twice == pytest.approx(direct)
    assert once[0] > 0 and once[1] < 0


def test_full_speed_for_one_second():
    controller = MovementController(intent=(1.0, 0.0))
    assert apply_movement((0.0, 0.0, 0.0), controller, 1.0) == (400.0, 0.0, 0.0)


def test_wrap_keeps_inside_positions():
    assert screen_wrap((10.0, -20.0), (800.0, 600.0)) == (10.0, -20.0)


@pytest.mark.parametrize("x", [-5000.0, -529.0, 0.0, 527.0, 528.0, 3000.5])
def test_wrap_result_in_range_and_periodic(x):
    window = (800.0, 600.0)
    width = window[0] + WRAP_MARGIN
    wrapped = screen_wrap((x, 0.0), window)[0]
    assert -width / 2 <= wrapped < width / 2
    assert screen_wrap((x + width, 0.0), window)[0] == pytest.approx(wrapped)


def test_wrap_right_edge_goes_to_left():
    window = (800.0, 600.0)
    half = (window[0] + WRAP_MARGIN) / 2
    assert screen_wrap((half, 0.0), window)[0] == -half