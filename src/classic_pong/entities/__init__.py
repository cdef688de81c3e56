"""
Entities package for Classic Pong.
This package contains the paddle and ball entities.
"""

from __future__ import annotations

from .ball import Ball, draw_direction, overlaps
from .paddle import LEFT_CONTROLS, RIGHT_CONTROLS, Paddle, PaddleControls

__all__ = [
    "Ball",
    "LEFT_CONTROLS",
    "Paddle",
    "PaddleControls",
    "RIGHT_CONTROLS",
    "draw_direction",
    "overlaps",
]
