"""
Main application for Classic Pong.
"""

from __future__ import annotations

import os

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    BackendSettings,
    FontSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from classic_pong.constants import (
    ARENA_COLOR,
    FONT_ENV_VAR,
    FPS,
    SCORE_FONT_SIZE,
    WINDOW_SIZE,
    WINDOW_TITLE,
)

# pylint: enable=no-name-in-module


def font_settings(env: dict[str, str] | None = None) -> list[FontSettings]:
    """
    Fonts to register with the backend.

    A TTF path in ``CLASSIC_PONG_FONT`` is loaded at the score size;
    otherwise no font is registered and the backend default is used.
    """
    env = os.environ if env is None else env
    path = env.get(FONT_ENV_VAR)
    if not path:
        return []
    return [FontSettings(name="default", path=path, size=SCORE_FONT_SIZE)]


def build_backend() -> NativeBackend:
    """Create the native backend window and renderer."""
    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title=WINDOW_TITLE,
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=ARENA_COLOR),
        fonts=font_settings(),
    )
    return NativeBackend(settings=backend_settings)


def run():
    """
    Main entry point for Classic Pong.

    - Auto-discovers scenes from the `classic_pong.scenes` package.
    - Opens a window the size of the arena.
    - Runs the match until the window is closed or ESC is pressed.
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "classic_pong.scenes", "mini_arcade_core.scenes"
    )

    game_config = GameConfig(
        initial_scene="pong",
        fps=FPS,
        backend=build_backend(),
    )
    logger.info("Starting Classic Pong...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
