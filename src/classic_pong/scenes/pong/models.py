"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from classic_pong.match import IDLE, Match, MatchSnapshot, PaddleCommand


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar viewport (tuple[float, float]): Viewport size (width, height).
    :ivar match (Match): The running match.
    """

    viewport: tuple[float, float]
    match: Match


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Player intent for the Pong scene.

    :ivar left (PaddleCommand): Keys held for the left paddle.
    :ivar right (PaddleCommand): Keys held for the right paddle.
    :ivar quit (bool): Whether to quit the game.
    """

    left: PaddleCommand = IDLE
    right: PaddleCommand = IDLE
    quit: bool = False


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    :ivar packet (Optional[RenderPacket]): Render packet for this tick.
    :ivar snapshot (Optional[MatchSnapshot]): Match state captured for
        drawing this tick.
    """

    snapshot: Optional[MatchSnapshot] = None
