import dataclasses

import pytest

from classic_pong.config import MatchConfig


def test_defaults_match_classic_arena():
    cfg = MatchConfig()

    assert cfg.viewport == (1280.0, 720.0)
    assert cfg.left_paddle_x == 50.0
    assert cfg.right_paddle_x == 1205.0
    assert cfg.paddle_speed == 500.0
    assert cfg.ball_speed == 500.0
    assert cfg.fair_serve is False


def test_config_is_frozen():
    cfg = MatchConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.arena_width = 10.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "field_name",
    ["arena_width", "arena_height", "paddle_speed", "ball_width"],
)
def test_non_positive_values_rejected(field_name):
    with pytest.raises(ValueError, match=field_name):
        MatchConfig(**{field_name: 0})


def test_offset_too_large_rejected():
    with pytest.raises(ValueError, match="paddle_offset"):
        MatchConfig(arena_width=200.0, paddle_offset=100.0)


def test_negative_offset_rejected():
    with pytest.raises(ValueError, match="paddle_offset"):
        MatchConfig(paddle_offset=-1.0)


def test_paddle_taller_than_arena_rejected():
    with pytest.raises(ValueError, match="paddle_height"):
        MatchConfig(arena_height=100.0)
