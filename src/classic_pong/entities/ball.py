"""
Ball entity for Classic Pong.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from classic_pong.config import MatchConfig
from classic_pong.entities.paddle import Paddle


def draw_direction(rng: random.Random, fair: bool = False) -> float:
    """
    Pick a direction sign from a single ``[0.0, 1.0)`` draw.

    The classic rule returns -1.0 only when the draw is exactly 0.0, so
    it yields +1.0 almost every time. ``fair=True`` splits the draw at
    0.5 instead.

    :param rng: Random source.
    :type rng: random.Random

    :param fair: Whether to use a fair coin flip.
    :type fair: bool

    :return: -1.0 or +1.0.
    :rtype: float
    """
    roll = rng.random()
    if fair:
        return -1.0 if roll < 0.5 else 1.0
    return -1.0 if roll == 0.0 else 1.0


def overlaps(a: Ball | Paddle, b: Ball | Paddle) -> bool:
    """
    Whether two rectangles share some area.

    Rectangles that only touch along an edge or at a corner do not
    overlap.
    """
    ax, ay = a.position.to_tuple()
    bx, by = b.position.to_tuple()
    return (
        ax < bx + b.size.width
        and bx < ax + a.size.width
        and ay < by + b.size.height
        and by < ay + a.size.height
    )


@dataclass
class Ball:
    """
    Ball entity for Classic Pong.

    :ivar position (Position2D): Top-left corner of the ball.
    :ivar size (Size2D): Size of the ball.
    :ivar dir_x (float): Horizontal direction sign, -1.0 or +1.0.
    :ivar dir_y (float): Vertical direction sign, -1.0 or +1.0.
    :ivar speed (float): Speed applied on each axis.
    """

    position: Position2D
    size: Size2D
    dir_x: float
    dir_y: float
    speed: float = 500.0

    @classmethod
    def create(
        cls, config: MatchConfig, rng: random.Random | None = None
    ) -> Ball:
        """Build a ball at the arena center with random directions."""
        rng = rng or random.Random()
        vw, vh = config.viewport
        return cls(
            position=Position2D(vw / 2, vh / 2),
            size=Size2D(config.ball_width, config.ball_height),
            dir_x=draw_direction(rng, config.fair_serve),
            dir_y=draw_direction(rng, config.fair_serve),
            speed=config.ball_speed,
        )

    @property
    def velocity(self) -> Velocity2D:
        """Velocity from the direction signs and speed."""
        return Velocity2D(self.dir_x * self.speed, self.dir_y * self.speed)

    def reset(
        self,
        dir_x: float,
        viewport: tuple[float, float],
        rng: random.Random,
        fair: bool = False,
    ):
        """
        Put the ball back at the arena center after a goal.

        :param dir_x: Horizontal direction of the new serve.
        :type dir_x: float

        :param viewport: Arena size (width, height).
        :type viewport: tuple[float, float]

        :param rng: Random source for the vertical direction.
        :type rng: random.Random

        :param fair: Whether to use a fair coin flip.
        :type fair: bool
        """
        vw, vh = viewport
        self.position = Position2D(vw / 2, vh / 2)
        self.dir_x = dir_x
        self.dir_y = draw_direction(rng, fair)

    def update(
        self,
        dt: float,
        paddle_1: Paddle,
        paddle_2: Paddle,
        viewport: tuple[float, float],
    ):
        """
        Move the ball and bounce it off paddles and walls.

        A bounce only happens while the ball is still heading into the
        surface it touches, so an overlap that lasts several frames
        flips the direction once.
        """
        _, vh = viewport

        x, y = self.position.to_tuple()
        self.position = Position2D(*self.velocity.advance(x, y, dt))

        if self.dir_x == -1.0 and overlaps(self, paddle_1):
            self.dir_x = -self.dir_x
        elif self.dir_x == 1.0 and overlaps(self, paddle_2):
            self.dir_x = -self.dir_x

        # top / bottom walls
        if (self.position.y < 0 and self.dir_y == -1.0) or (
            self.position.y + self.size.height > vh and self.dir_y == 1.0
        ):
            self.dir_y = -self.dir_y
