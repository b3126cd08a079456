"""The game's scenes."""

from __future__ import annotations

from typing import Any

from dancearcade.engine import Engine
from dancearcade.game import SCREEN_HEIGHT, SCREEN_WIDTH
from dancearcade.scene import Scene, SceneObject
from dancearcade.transform import get_screen_center

import pygame

LOGO_PATH = "../assets/images/start_screen_logo.png"
HOME_BACKGROUND_PATH = "../assets/background/home_background.jpg"
PROMPT_TEXT = "Press anything to continue..."

_HELD_KEY_MESSAGES = (
    (pygame.K_ESCAPE, "Escape key held!"),
    (pygame.K_SPACE, "Space key held!"),
    (pygame.K_a, "A key held!"),
    (pygame.K_s, "S key held!"),
    (pygame.K_j, "J key held!"),
    (pygame.K_k, "K key held!"),
)


def _ignore(engine: Any) -> None:
    """Lifecycle hook that has nothing to do."""


def _home_update(engine: Any, event: Any) -> None:
    state = engine.state
    for key, message in _HELD_KEY_MESSAGES:
        if state[key]:
            print(message, flush=True)


def home_scene(engine: Engine) -> Scene:
    """Build the start screen: background, centred logo and prompt text."""
    home = Scene(
        title="Home",
        update=_home_update,
        init=_ignore,
        destroy=_ignore,
        on_set_as_curr_scene=_ignore,
    )

    logo = engine.load_texture(LOGO_PATH)
    background = engine.load_texture(HOME_BACKGROUND_PATH)
    text = engine.load_text(PROMPT_TEXT, 24)

    tex_w, tex_h = logo.get_size()
    center = get_screen_center(SCREEN_WIDTH, SCREEN_HEIGHT, tex_w, tex_h)
    home.ui.append(SceneObject("logo", logo, center.x, center.y - 100, tex_w, tex_h, 0.0))

    home.background.append(
        SceneObject("home_background", background, 0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, 0.0)
    )

    if text is not None:
        tex_w, tex_h = text.get_size()
    center = get_screen_center(SCREEN_WIDTH, SCREEN_HEIGHT, tex_w, tex_h)
    home.ui.append(SceneObject("ui elem", text, center.x, center.y + 100, tex_w, tex_h, 0.0))

    return home


def no_scene(engine: Engine) -> Scene:
    """Build the placeholder scene shown when nothing else is available."""
    placeholder = Scene(title="No Scene")
    placeholder.background.append(
        SceneObject(texture=engine.load_texture("assets/backgrounds/no_scene_background.png"))
    )
    placeholder.scene.append(
        SceneObject(texture=engine.load_texture("assets/scenes/no_scene_scene.png"))
    )
    placeholder.ui.append(
        SceneObject(texture=engine.load_texture("assets/ui/no_scene_ui.png"))
    )
    return placeholder