# dancearcade

A small scene-based game engine built on pygame. It includes the start screen of a dance arcade game.

## Installation

```
pip install .
```

## Running the game

```
dancearcade
```

This command (`dancearcade.main:main`) opens an 800×600 window titled "Dance Arcade" and shows the home scene. The home scene contains:

- a full-screen background,
- a centred logo,
- a "Press anything to continue..." prompt.

While the scene runs, it prints a line to standard output for each of these keys held down: Escape, Space, A, S, J and K. Close the window to quit.

Assets load from paths relative to the working directory:

- `../assets/fonts/Montserrat-Bold.ttf`
- `../assets/images/start_screen_logo.png`
- `../assets/background/home_background.jpg`

If start-up fails, for example because an asset is missing, the command does three things:

- logs the error,
- logs "Failed to start Dance Arcade",
- exits with status 1.

## Using the engine

```python
from dancearcade.engine import Engine
from dancearcade.scene import Scene, SceneObject

with Engine(800, 600, "My Game") as engine:
    text = engine.load_text("Hello", 24)
    width, height = text.get_size()
    scene = Scene("Menu")
    scene.ui.append(SceneObject("title", text, x=10, y=10, width=width, height=height))
    engine.load_scene(scene)
    engine.set_current_scene("Menu")
    engine.run()
```

### `Engine(width, height, title, *, font_path=..., audio=True)`

The constructor sets up the display, the mixer (skipped when `audio=False`), the window and the font. The default font path is `../assets/fonts/Montserrat-Bold.ttf`. Pass `font_path=None` to use pygame's default font. Any failure raises `RuntimeError`.

Members:

- `run()` polls events, calls the current scene's `update` and draws the scene, at up to 60 frames per second. It returns when the window is closed or when `running` is set to `False`. If there is no current scene, it logs a warning on each frame.
- `load_scene(scene)` registers a scene by its title, marks it loaded and calls its `init` hook. If a scene with that title is already loaded, it makes that scene current instead.
- `set_current_scene(name)` makes a loaded scene current and calls its `on_set_as_curr_scene` hook. An unknown name is logged as an error.
- `unload_scene(scene)` does the following:
  - calls the scene's `destroy` hook,
  - drops the textures of its objects from the engine's list,
  - clears the current scene if it was this one,
  - forgets the scene.
- `load_texture(path)` loads an image file. If the file cannot be loaded, it sets `running` to `False` and raises `RuntimeError`.
- `load_text(text, size)` renders white text with the engine font. `size` is accepted but ignored, because the font size is fixed at 24. It returns `None` if rendering fails.
- `unload_texture(texture)` stops tracking a texture.
- `close()` releases everything and shuts pygame down. It is also called on leaving a `with` block.
- The read-only views `current_scene`, `scenes` and `loaded_textures` show the engine's current state.
- `state` gives the current keyboard state.

### Scenes

A `dancearcade.scene.Scene` has a `title` and three lists of `SceneObject`. They are drawn in this order: `background`, then `scene`, then `ui`.

Each `SceneObject` has these fields:

- `name`
- `texture`
- `x`
- `y`
- `width`
- `height`
- `rotation`
- `visible`

An object is drawn only when all of these hold:

- it has a texture,
- it is visible,
- its width and height are positive.

The texture is scaled to the object's width and height. Rotation is stored but not applied.

A scene can have four hooks:

- `init(engine)` runs when the scene is loaded.
- `on_set_as_curr_scene(engine)` runs when the scene becomes current.
- `update(engine, event)` runs once per frame.
- `destroy(engine)` runs when the scene is unloaded.

`dancearcade.scenes` builds the two ready-made scenes:

- `home_scene(engine)` builds the start screen.
- `no_scene(engine)` builds a placeholder. It loads `assets/backgrounds/no_scene_background.png`, `assets/scenes/no_scene_scene.png` and `assets/ui/no_scene_ui.png`.

### Helpers

- `dancearcade.transform.get_screen_center(screen_width, screen_height, tex_width, tex_height)` returns the top-left `Vector2` that centres a texture on the screen.
- `dancearcade.log` provides `info` and `debug`, which write to standard output, and `warning` and `error`, which write to standard error. Each message gets a coloured prefix. `debug` output is controlled by `log.DEBUG`.
- `dancearcade.game` defines these data types:
  - `ArrowType`, the five pads.
  - `Arrow`, a 50×50 red square. It falls at 200 pixels per second through `update(delta)` and is drawn with `draw(surface)`.
  - `Song`, with fields `name`, `description`, `path`, `background` and `length`.
  - `Game`, with fields `scroll_speed`, `songs`, `curr_song_index` and `curr_song`.

## What it does not do

There is no gameplay yet. No scene uses `Arrow`, `Song` or `Game`. Songs are not loaded or played, there is no song selection, and there is no scoring. Pressing a key on the home screen does not lead anywhere. The game only shows the start screen and reports held keys.

## Tests

```
pip install .[test]
pytest
```