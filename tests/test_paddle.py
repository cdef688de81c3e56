import pytest

from classic_pong.entities import LEFT_CONTROLS, Paddle
from tests.helpers import make_paddle


def test_create_starts_at_vertical_center(config):
    paddle = Paddle.create(50.0, LEFT_CONTROLS, config)

    assert paddle.position.x == 50.0
    assert paddle.position.y == 360.0
    assert paddle.points == 0
    assert paddle.speed == 500.0
    assert paddle.controls is LEFT_CONTROLS


def test_up_moves_by_speed_times_dt(viewport):
    paddle = make_paddle(50.0, 360.0)
    paddle.update(0.1, True, False, viewport)
    assert paddle.position.y == pytest.approx(310.0)


def test_down_moves_by_speed_times_dt(viewport):
    paddle = make_paddle(50.0, 360.0)
    paddle.update(0.1, False, True, viewport)
    assert paddle.position.y == pytest.approx(410.0)


def test_large_frame_overshoots_top_once(viewport):
    paddle = make_paddle(50.0, 5.0)

    paddle.update(0.1, True, False, viewport)
    assert paddle.position.y == pytest.approx(-45.0)

    # already past the wall: no further upward motion
    paddle.update(0.1, True, False, viewport)
    assert paddle.position.y == pytest.approx(-45.0)


def test_large_frame_overshoots_bottom_by_at_most_one_step(viewport):
    paddle = make_paddle(50.0, 569.0)

    paddle.update(0.1, False, True, viewport)
    assert paddle.position.y == pytest.approx(619.0)
    overshoot = paddle.position.y + paddle.size.height - viewport[1]
    assert 0 < overshoot <= paddle.speed * 0.1

    paddle.update(0.1, False, True, viewport)
    assert paddle.position.y == pytest.approx(619.0)


def test_blocked_at_walls(viewport):
    top = make_paddle(50.0, 0.0)
    top.update(0.1, True, False, viewport)
    assert top.position.y == 0.0

    bottom = make_paddle(50.0, 570.0)
    bottom.update(0.1, False, True, viewport)
    assert bottom.position.y == 570.0


def test_both_keys_cancel_out(viewport):
    paddle = make_paddle(50.0, 100.0)
    paddle.update(0.1, True, True, viewport)
    assert paddle.position.y == pytest.approx(100.0)


def test_zero_dt_is_a_no_op(viewport):
    paddle = make_paddle(50.0, 200.0)
    paddle.update(0.0, True, False, viewport)
    paddle.update(0.0, False, True, viewport)
    assert paddle.position.y == 200.0
    assert paddle.position.x == 50.0


def test_score_increments_by_one():
    paddle = make_paddle(50.0, 200.0)
    paddle.score()
    paddle.score()
    assert paddle.points == 2
