"""
Match configuration for Classic Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from classic_pong.constants import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BALL_SIZE,
    BALL_SPEED,
    PADDLE_OFFSET,
    PADDLE_SIZE,
    PADDLE_SPEED,
)


# Justification: one field per tunable, grouping would hide the constants
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class MatchConfig:
    """
    Tunables for a single match.

    :ivar arena_width (float): Width of the arena.
    :ivar arena_height (float): Height of the arena.
    :ivar paddle_offset (float): Distance of the left paddle from the left wall.
    :ivar paddle_width (float): Paddle width.
    :ivar paddle_height (float): Paddle height.
    :ivar paddle_speed (float): Paddle speed (units/sec).
    :ivar ball_width (float): Ball width.
    :ivar ball_height (float): Ball height.
    :ivar ball_speed (float): Ball speed per axis (units/sec).
    :ivar fair_serve (bool): Use a fair coin flip for serve directions
        instead of the classic exact-zero draw.
    """

    arena_width: float = ARENA_WIDTH
    arena_height: float = ARENA_HEIGHT
    paddle_offset: float = PADDLE_OFFSET
    paddle_width: float = PADDLE_SIZE[0]
    paddle_height: float = PADDLE_SIZE[1]
    paddle_speed: float = PADDLE_SPEED
    ball_width: float = BALL_SIZE[0]
    ball_height: float = BALL_SIZE[1]
    ball_speed: float = BALL_SPEED
    fair_serve: bool = False

    def __post_init__(self):
        positive = {
            "arena_width": self.arena_width,
            "arena_height": self.arena_height,
            "paddle_width": self.paddle_width,
            "paddle_height": self.paddle_height,
            "paddle_speed": self.paddle_speed,
            "ball_width": self.ball_width,
            "ball_height": self.ball_height,
            "ball_speed": self.ball_speed,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        if self.paddle_offset < 0:
            raise ValueError(
                f"paddle_offset must not be negative, got {self.paddle_offset}"
            )
        if self.right_paddle_x < self.paddle_offset + self.paddle_width:
            raise ValueError(
                "paddle_offset leaves no room between the paddles "
                f"(arena_width={self.arena_width}, "
                f"paddle_offset={self.paddle_offset})"
            )
        if self.paddle_height > self.arena_height:
            raise ValueError("paddle_height must fit inside the arena")

    @property
    def viewport(self) -> tuple[float, float]:
        """Arena size as (width, height)."""
        return (self.arena_width, self.arena_height)

    @property
    def left_paddle_x(self) -> float:
        """Horizontal position of the left paddle."""
        return self.paddle_offset

    @property
    def right_paddle_x(self) -> float:
        """Horizontal position of the right paddle."""
        return self.arena_width - self.paddle_offset * 1.5


# pylint: enable=too-many-instance-attributes
