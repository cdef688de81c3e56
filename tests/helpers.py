"""Builders shared across the test modules."""

from __future__ import annotations

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from classic_pong.entities import (
    LEFT_CONTROLS,
    RIGHT_CONTROLS,
    Ball,
    Paddle,
)


class FixedRandom:
    """Stand-in RNG that replays the given draws."""

    def __init__(self, *values: float):
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)


def make_paddle(x: float, y: float, left: bool = True) -> Paddle:
    return Paddle(
        position=Position2D(x, y),
        size=Size2D(32.0, 150.0),
        controls=LEFT_CONTROLS if left else RIGHT_CONTROLS,
    )


def make_ball(x: float, y: float, dir_x: float, dir_y: float) -> Ball:
    return Ball(
        position=Position2D(x, y),
        size=Size2D(32.0, 32.0),
        dir_x=dir_x,
        dir_y=dir_y,
    )
