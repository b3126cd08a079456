import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

from collections import defaultdict
from types import SimpleNamespace

import pygame
import pytest

from dancearcade.engine import Engine
from dancearcade.game import SCREEN_HEIGHT, SCREEN_WIDTH
from dancearcade.scenes import home_scene, no_scene
from dancearcade.transform import get_screen_center


@pytest.fixture
def engine():
    eng = Engine(160, 120, "Test", font_path=None, audio=False)
    yield eng
    eng.close()


def _save(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill((200, 100, 50))
    pygame.image.save(surface, str(path))


@pytest.fixture
def game_dir(tmp_path, monkeypatch):
    work = tmp_path / "software"
    work.mkdir()
    monkeypatch.chdir(work)
    return tmp_path


def test_home_scene_layout(engine, game_dir):
    _save(game_dir / "assets/images/start_screen_logo.png", (40, 20))
    _save(game_dir / "assets/background/home_background.jpg", (30, 30))

    home = home_scene(engine)

    assert home.title == "Home"
    assert [obj.name for obj in home.background] == ["home_background"]
    assert [obj.name for obj in home.ui] == ["logo", "ui elem"]

    logo = home.ui[0]
    logo_center = get_screen_center(SCREEN_WIDTH, SCREEN_HEIGHT, 40, 20)
    assert (logo.x, logo.y, logo.width, logo.height) == (
        logo_center.x,
        logo_center.y - 100,
        40,
        20,
    )

    bg = home.background[0]
    assert (bg.x, bg.y, bg.width, bg.height) == (0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)

    text = home.ui[1]
    text_w, text_h = text.texture.get_size()
    text_center = get_screen_center(SCREEN_WIDTH, SCREEN_HEIGHT, text_w, text_h)
    assert (text.x, text.y) == (text_center.x, text_center.y + 100)
    assert len(engine.loaded_textures) == 3


def test_home_scene_missing_assets_raises(engine, game_dir):
    with pytest.raises(RuntimeError, match="start_screen_logo.png"):
        home_scene(engine)


def test_home_scene_loads_into_engine(engine, game_dir):
    _save(game_dir / "assets/images/start_screen_logo.png", (10, 10))
    _save(game_dir / "assets/background/home_background.jpg", (10, 10))
    home = home_scene(engine)
    engine.load_scene(home)
    engine.set_current_scene("Home")
    assert engine.current_scene is home
    assert home.loaded is True


def test_home_update_reports_held_keys(engine, game_dir, capsys):
    _save(game_dir / "assets/images/start_screen_logo.png", (10, 10))
    _save(game_dir / "assets/background/home_background.jpg", (10, 10))
    home = home_scene(engine)
    capsys.readouterr()

    state = defaultdict(bool, {pygame.K_a: True, pygame.K_k: True})
    home.update(SimpleNamespace(state=state), None)

    out = capsys.readouterr().out
    assert "A key held!" in out
    assert "K key held!" in out
    assert "Space key held!" not in out


def test_no_scene_has_one_object_per_layer(engine, game_dir):
    work = game_dir / "software"
    _save(work / "assets/backgrounds/no_scene_background.png", (3, 3))
    _save(work / "assets/scenes/no_scene_scene.png", (4, 4))
    _save(work / "assets/ui/no_scene_ui.png", (5, 5))

    placeholder = no_scene(engine)

    assert placeholder.title == "No Scene"
    assert placeholder.update is None
    assert [obj.texture.get_size() for obj in placeholder.background] == [(3, 3)]
    assert [obj.texture.get_size() for obj in placeholder.scene] == [(4, 4)]
    assert [obj.texture.get_size() for obj in placeholder.ui] == [(5, 5)]