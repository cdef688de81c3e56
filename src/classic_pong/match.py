"""
Match state and per-frame orchestration for Classic Pong.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from mini_arcade_core.utils import logger

from classic_pong.config import MatchConfig
from classic_pong.entities import (
    LEFT_CONTROLS,
    RIGHT_CONTROLS,
    Ball,
    Paddle,
)

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class PaddleCommand:
    """
    Keys held for one paddle during a frame.

    :ivar up (bool): Up key is down.
    :ivar down (bool): Down key is down.
    """

    up: bool = False
    down: bool = False


IDLE = PaddleCommand()


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Read-only view of the match handed to the renderer.

    :ivar left_paddle (Rect): (x, y, width, height) of paddle 1.
    :ivar right_paddle (Rect): (x, y, width, height) of paddle 2.
    :ivar ball (Rect): (x, y, width, height) of the ball.
    :ivar left_points (int): Points of paddle 1.
    :ivar right_points (int): Points of paddle 2.
    """

    left_paddle: Rect
    right_paddle: Rect
    ball: Rect
    left_points: int
    right_points: int

    @property
    def score_text(self) -> str:
        """Score line shown at the top of the arena."""
        return f"{self.left_points} - {self.right_points}"


def _rect(entity: Paddle | Ball) -> Rect:
    return (
        entity.position.x,
        entity.position.y,
        entity.size.width,
        entity.size.height,
    )


def check_for_goal(
    ball: Ball,
    paddle_1: Paddle,
    paddle_2: Paddle,
    viewport: tuple[float, float],
    rng: random.Random,
    fair: bool = False,
) -> list[str]:
    """
    Award a point when the ball has left the arena horizontally.

    Past the right wall paddle 1 scores and the ball is served left;
    past the left wall paddle 2 scores and the ball is served right.
    Both walls are checked on every call.

    :return: Sides that scored this frame ("P1" and/or "P2").
    :rtype: list[str]
    """
    vw, _ = viewport
    scored = []

    if ball.position.x > vw:
        paddle_1.score()
        ball.reset(-1.0, viewport, rng, fair)
        scored.append("P1")

    if ball.position.x < 0:
        paddle_2.score()
        ball.reset(1.0, viewport, rng, fair)
        scored.append("P2")

    for side in scored:
        logger.info(
            f"Goal {side}: {paddle_1.points} - {paddle_2.points}"
        )
    if scored:
        logger.debug(
            f"Ball served with dir=({ball.dir_x}, {ball.dir_y})"
        )
    return scored


@dataclass
class Match:
    """
    Owns both paddles and the ball and steps them once per frame.

    :ivar config (MatchConfig): Match configuration.
    :ivar paddle_1 (Paddle): Left paddle.
    :ivar paddle_2 (Paddle): Right paddle.
    :ivar ball (Ball): The ball.
    :ivar rng (random.Random): Random source for serve directions.
    """

    config: MatchConfig
    paddle_1: Paddle
    paddle_2: Paddle
    ball: Ball
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(
        cls,
        config: MatchConfig | None = None,
        rng: random.Random | None = None,
    ) -> Match:
        """
        Build a fresh match.

        :param config: Match configuration, defaults to ``MatchConfig()``.
        :type config: MatchConfig, optional

        :param rng: Random source, defaults to an unseeded ``random.Random``.
        :type rng: random.Random, optional

        :return: The new match.
        :rtype: Match
        """
        config = config or MatchConfig()
        rng = rng or random.Random()
        return cls(
            config=config,
            paddle_1=Paddle.create(
                config.left_paddle_x, LEFT_CONTROLS, config
            ),
            paddle_2=Paddle.create(
                config.right_paddle_x, RIGHT_CONTROLS, config
            ),
            ball=Ball.create(config, rng),
            rng=rng,
        )

    @property
    def viewport(self) -> tuple[float, float]:
        """Arena size as (width, height)."""
        return self.config.viewport

    def check_for_goal(self) -> list[str]:
        """Run goal detection on this match's entities."""
        return check_for_goal(
            self.ball,
            self.paddle_1,
            self.paddle_2,
            self.viewport,
            self.rng,
            self.config.fair_serve,
        )

    def step(
        self,
        dt: float,
        left: PaddleCommand = IDLE,
        right: PaddleCommand = IDLE,
    ) -> list[str]:
        """
        Advance the match by one frame.

        Paddles move first so the ball collides against this frame's
        paddle positions; goals are checked last.

        :param dt: Elapsed time since the last frame, in seconds.
        :type dt: float

        :param left: Keys held for paddle 1.
        :type left: PaddleCommand

        :param right: Keys held for paddle 2.
        :type right: PaddleCommand

        :return: Sides that scored this frame.
        :rtype: list[str]
        """
        self.paddle_1.update(dt, left.up, left.down, self.viewport)
        self.paddle_2.update(dt, right.up, right.down, self.viewport)
        self.ball.update(dt, self.paddle_1, self.paddle_2, self.viewport)
        return self.check_for_goal()

    def snapshot(self) -> MatchSnapshot:
        """Current positions and scores for drawing."""
        return MatchSnapshot(
            left_paddle=_rect(self.paddle_1),
            right_paddle=_rect(self.paddle_2),
            ball=_rect(self.ball),
            left_points=self.paddle_1.points,
            right_points=self.paddle_2.points,
        )
