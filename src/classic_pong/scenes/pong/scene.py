"""
Classic Pong scene using mini-arcade-core.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)
from mini_arcade_core.utils import logger

from classic_pong.config import MatchConfig
from classic_pong.constants import OBJECT_COLOR, SCORE_X_SHIFT, SCORE_Y
from classic_pong.entities import PaddleControls
from classic_pong.match import Match, PaddleCommand, Rect
from classic_pong.scenes.pong.models import (
    PongIntent,
    PongTickContext,
    PongWorld,
)


def _command(controls: PaddleControls, down: set[Key]) -> PaddleCommand:
    return PaddleCommand(up=controls.up in down, down=controls.down in down)


@dataclass
class PongInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def build_intent(self, ctx: PongTickContext):
        """Read held keys for both paddles."""
        down = ctx.input_frame.keys_down
        match = ctx.world.match

        return PongIntent(
            left=_command(match.paddle_1.controls, down),
            right=_command(match.paddle_2.controls, down),
            quit=Key.ESCAPE in ctx.input_frame.keys_pressed,
        )


@dataclass
class PongQuitSystem:
    """Quit the game when ESC is pressed."""

    name: str = "pong_quit"
    order: int = 12  # right after input

    def step(self, ctx: PongTickContext):
        """Push a quit command if requested."""
        if ctx.intent is None or not ctx.intent.quit:
            return

        logger.info("Quit requested")
        ctx.commands.push(QuitCommand())


@dataclass
class MatchStepSystem:
    """
    Advance the match: paddles, then ball, then goal check.
    """

    name: str = "pong_match"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Step the match by this tick's dt."""
        intent = ctx.intent or PongIntent()
        ctx.world.match.step(ctx.dt, intent.left, intent.right)


def _draw_rect(backend: Backend, rect: Rect):
    x, y, w, h = rect
    backend.render.draw_rect(
        int(x), int(y), int(w), int(h), color=OBJECT_COLOR
    )


class DrawLeftPaddle(Drawable[PongTickContext]):
    """
    Drawable to render the left paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_rect(backend, ctx.snapshot.left_paddle)


class DrawRightPaddle(Drawable[PongTickContext]):
    """
    Drawable to render the right paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_rect(backend, ctx.snapshot.right_paddle)


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_rect(backend, ctx.snapshot.ball)


class DrawScore(Drawable[PongTickContext]):
    """
    Drawable to render the score as "<left> - <right>".
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        vw, _ = ctx.world.viewport
        text = ctx.snapshot.score_text
        backend.text.draw(
            int(vw / 2) - SCORE_X_SHIFT, SCORE_Y, text, color=OBJECT_COLOR
        )


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def build_draw_ops(self, ctx: PongTickContext) -> list[DrawCall]:
        """Capture this tick's snapshot and list the draw calls in order."""
        ctx.snapshot = ctx.world.match.snapshot()
        return [
            DrawCall(drawable=DrawScore(), ctx=ctx),
            DrawCall(drawable=DrawLeftPaddle(), ctx=ctx),
            DrawCall(drawable=DrawRightPaddle(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
        ]

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""
        ctx.draw_ops = self.build_draw_ops(ctx)
        super().step(ctx)


@register_scene("pong")
class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    The single, endless match.
    """

    tick_context_type = PongTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        config = MatchConfig(arena_width=float(vw), arena_height=float(vh))
        self.world = PongWorld(
            viewport=config.viewport, match=Match.create(config)
        )
        logger.info(f"Match started on a {vw}x{vh} arena")

        self.systems.extend(
            [
                PongInputSystem(),
                PongQuitSystem(),
                MatchStepSystem(),
                PongRenderSystem(),
            ]
        )
