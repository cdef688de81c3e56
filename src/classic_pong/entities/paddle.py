"""
Paddle entity for Classic Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend.keys import Key
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from classic_pong.config import MatchConfig


@dataclass(frozen=True)
class PaddleControls:
    """
    Keyboard bindings for one paddle.

    :ivar up (Key): Key that moves the paddle up.
    :ivar down (Key): Key that moves the paddle down.
    """

    up: Key
    down: Key


LEFT_CONTROLS = PaddleControls(up=Key.W, down=Key.S)
RIGHT_CONTROLS = PaddleControls(up=Key.UP, down=Key.DOWN)


@dataclass
class Paddle:
    """
    One player's paddle.

    :ivar position (Position2D): Top-left corner; x never changes.
    :ivar size (Size2D): Size of the paddle.
    :ivar controls (PaddleControls): Keys bound to this paddle.
    :ivar speed (float): Movement speed of the paddle.
    :ivar points (int): Goals scored by this paddle's player.
    """

    position: Position2D
    size: Size2D
    controls: PaddleControls
    speed: float = 500.0
    points: int = 0

    @classmethod
    def create(
        cls, x: float, controls: PaddleControls, config: MatchConfig
    ) -> Paddle:
        """
        Build a paddle at ``x`` with its top edge at the arena's vertical
        center and no points.

        :param x: Horizontal position, fixed for the paddle's lifetime.
        :type x: float

        :param controls: Keys bound to the paddle.
        :type controls: PaddleControls

        :param config: Match configuration.
        :type config: MatchConfig

        :return: The new paddle.
        :rtype: Paddle
        """
        return cls(
            position=Position2D(x, config.arena_height / 2),
            size=Size2D(config.paddle_width, config.paddle_height),
            controls=controls,
            speed=config.paddle_speed,
        )

    def update(
        self,
        dt: float,
        up_pressed: bool,
        down_pressed: bool,
        viewport: tuple[float, float],
    ):
        """
        Move the paddle for one frame.

        Each direction is only applied while the paddle has not yet
        reached the matching wall. There is no clamp afterwards, so a
        long frame can carry the paddle past the wall by at most
        ``speed * dt``.
        """
        _, vh = viewport
        x, y = self.position.to_tuple()

        if up_pressed and y > 0:
            _, y = Velocity2D(0.0, -self.speed).advance(x, y, dt)
        if down_pressed and y + self.size.height < vh:
            _, y = Velocity2D(0.0, self.speed).advance(x, y, dt)

        self.position = Position2D(x, y)

    def score(self):
        """Award one point to this paddle."""
        self.points += 1
