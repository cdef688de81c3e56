"""
Game-wide constants for Classic Pong.

Distances are in pixels, speeds in pixels per second.
"""

from __future__ import annotations

# Arena
ARENA_WIDTH = 1280.0
ARENA_HEIGHT = 720.0
WINDOW_SIZE = (int(ARENA_WIDTH), int(ARENA_HEIGHT))
WINDOW_TITLE = "Pong"
FPS = 60

# Paddles
PADDLE_OFFSET = 50.0
PADDLE_SPEED = 500.0
PADDLE_SIZE = (32.0, 150.0)

# Ball
BALL_SPEED = 500.0
BALL_SIZE = (32.0, 32.0)

# Colors (R,G,B)
ARENA_COLOR = (0, 0, 0)
OBJECT_COLOR = (255, 255, 255)

# Score text, drawn near the top center
SCORE_FONT_SIZE = 96
SCORE_X_SHIFT = 120
SCORE_Y = 0

# Optional TTF used for the score; the backend default is used otherwise
FONT_ENV_VAR = "CLASSIC_PONG_FONT"
