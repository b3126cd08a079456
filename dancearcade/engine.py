"""The game engine: window, main loop, scenes and textures."""

from __future__ import annotations

import time
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import pygame

from dancearcade import log
from dancearcade.scene import FPS, Scene, SceneObject

DEFAULT_FONT_PATH = "../assets/fonts/Montserrat-Bold.ttf"
FONT_SIZE = 24
TEXT_COLOR = (255, 255, 255)
CLEAR_COLOR = (0, 0, 0)


class Engine:
    """Owns the window and runs the current scene once per frame."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        *,
        font_path: Optional[str] = DEFAULT_FONT_PATH,
        audio: bool = True,
    ) -> None:
        self.running = False
        self.delta_time = 0.0
        self._scenes: dict[str, Scene] = {}
        self._current_scene: Optional[Scene] = None
        self._loaded_textures: list[pygame.Surface] = []
        self._font: Optional[pygame.font.Font] = None
        self._screen: Optional[pygame.Surface] = None
        self._closed = False
        try:
            self._start(width, height, title, font_path, audio)
        except BaseException:
            self._closed = True
            self._shutdown()
            raise

    def _start(
        self,
        width: int,
        height: int,
        title: str,
        font_path: Optional[str],
        audio: bool,
    ) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL could not initialize: {exc}") from exc

        if audio:
            try:
                pygame.mixer.init(44100, -16, 2, 2048)
            except pygame.error as exc:
                raise RuntimeError(f"SDL_mixer could not initialize: {exc}") from exc

        try:
            self._screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
        except pygame.error as exc:
            raise RuntimeError(f"Window could not be created: {exc}") from exc

        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(f"Failed to init TTF: {exc}") from exc

        try:
            self._font = pygame.font.Font(font_path, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"Failed to load font with TTF: {exc}") from exc

        self.running = True
        self._start_time = time.perf_counter()

    @staticmethod
    def _shutdown() -> None:
        if pygame.font.get_init():
            pygame.font.quit()
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        if pygame.display.get_init():
            pygame.display.quit()
        pygame.quit()

    def __enter__(self) -> "Engine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def state(self) -> Any:
        """The current keyboard state, indexable by key constants."""
        return pygame.key.get_pressed()

    @property
    def current_scene(self) -> Optional[Scene]:
        return self._current_scene

    @property
    def scenes(self) -> Mapping[str, Scene]:
        return MappingProxyType(self._scenes)

    @property
    def loaded_textures(self) -> tuple[pygame.Surface, ...]:
        return tuple(self._loaded_textures)

    def close(self) -> None:
        """Release textures, unload the current scene and shut the window."""
        if self._closed:
            return
        self._closed = True
        self._loaded_textures.clear()
        self.unload_scene(self._current_scene)
        self._font = None
        self._screen = None
        self._shutdown()

    def run(self) -> None:
        """Run the main loop until the window is closed or running is cleared."""
        self.running = True
        frame_delay = 1000 // FPS
        self.delta_time = time.perf_counter() - self._start_time

        while self.running:
            frame_start = time.perf_counter()

            event = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    log.info("Running is now false")
            if not self.running:
                break

            scene = self._current_scene
            if scene is not None:
                if scene.update is not None:
                    scene.update(self, event)
                self._render(scene)
            else:
                log.warning("No current scene to render, skipping render step.")

            elapsed_ms = int((time.perf_counter() - frame_start) * 1000)
            self.delta_time = elapsed_ms
            if elapsed_ms < frame_delay:
                pygame.time.wait(frame_delay - elapsed_ms)

        log.info("Done with engine loop")

    def _render(self, scene: Optional[Scene]) -> None:
        if scene is None or self._screen is None:
            return
        self._screen.fill(CLEAR_COLOR)
        for layer in (scene.background, scene.scene, scene.ui):
            for obj in layer:
                self._draw(obj)
        pygame.display.flip()

    def _draw(self, obj: SceneObject) -> None:
        if obj.texture is None or not obj.visible:
            return
        if obj.width <= 0 or obj.height <= 0:
            return
        image = obj.texture
        if image.get_size() != (obj.width, obj.height):
            image = pygame.transform.scale(image, (obj.width, obj.height))
        self._screen.blit(image, (obj.x, obj.y))

    def load_scene(self, scene: Optional[Scene]) -> None:
        """Register a scene and run its init hook, or reuse one already loaded."""
        if scene is None:
            log.error("Could not load Scene because its null")
            return

        if scene.loaded or scene.title in self._scenes:
            log.info(f"Scene {scene.title} already exists, reusing it.")
            self._current_scene = self._scenes.get(scene.title)
            return

        log.info(f"Loading Scene {scene.title}...")
        self._scenes[scene.title] = scene
        scene.loaded = True
        log.info(f"Loaded Scene {scene.title}!")
        if scene.init is not None:
            log.debug(f"Calling init function for Scene {scene.title}...")
            scene.init(self)
            log.debug(f"Init function for Scene {scene.title} called successfully.")
        else:
            log.warning(f"Scene {scene.title} has no init function, skipping.")

    def set_current_scene(self, name: str) -> None:
        """Make the loaded scene with this title the one that is run."""
        scene = self._scenes.get(name)
        if scene is None:
            log.error(f"Could not set current Scene because it does not exist: {name}")
            return

        if not scene.loaded:
            log.error(f"Scene {scene.title} is not loaded, cannot set as current scene.")
            return

        self._current_scene = scene
        log.info(f"Set current Scene to: {scene.title}")

        if scene.on_set_as_curr_scene is not None:
            log.info(f"Running on set as current scene function for: {scene.title}")
            scene.on_set_as_curr_scene(self)
            log.info(f"Ran on set as current scene function for: {scene.title}")
        else:
            log.info(f"Scene has no on set as current scene function: {scene.title}")

    def unload_scene(self, scene: Optional[Scene]) -> None:
        """Run a scene's destroy hook, free its textures and forget it."""
        if scene is None:
            log.error("Could not unload Scene because its null")
            return

        if not scene.loaded:
            log.warning(f"Scene {scene.title} is not loaded, nothing to unload.")
            return

        log.info(f"Unloading Scene {scene.title}...")
        print(
            f"{scene.title} has {len(scene.background)} background textures, "
            f"{len(scene.scene)} scene textures, and "
            f"{len(scene.ui)} ui textures.",
            flush=True,
        )

        if scene.destroy is not None:
            log.debug(f"Calling destroy function for Scene {scene.title}...")
            scene.destroy(self)
            log.debug(f"Destroy function for Scene {scene.title} called successfully.")
        else:
            log.warning(f"Scene {scene.title} has no destroy function, skipping.")

        for label, layer in (
            ("background", scene.background),
            ("scene", scene.scene),
            ("ui", scene.ui),
        ):
            log.debug(f"Unloading {label} textures...")
            for obj in layer:
                if obj.texture is not None:
                    self.unload_texture(obj.texture)
        log.debug(f"Unloaded all textures for Scene: {scene.title}!")

        if self._current_scene is scene:
            self._current_scene = None
        self._scenes.pop(scene.title, None)
        log.info(f"Unloaded Scene {scene.title}!")

    def load_texture(self, path: str) -> pygame.Surface:
        """Load an image file as a texture; raise RuntimeError on failure."""
        try:
            texture = pygame.image.load(path)
            if self._screen is not None:
                texture = texture.convert_alpha()
        except (OSError, pygame.error) as exc:
            if Path(path).exists():
                log.error(f"Failed to load texture from path: {path} - {exc}")
            else:
                log.error(f"Texture file does not exist: {path}")
            self.running = False
            raise RuntimeError(f"Failed to load texture: {path}") from exc

        self._loaded_textures.append(texture)
        log.info(f"Loaded texture: {path}")
        return texture

    def load_text(self, text: str, size: int) -> Optional[pygame.Surface]:
        """Render text in white with the engine font; None if rendering fails."""
        if self._font is None:
            message = "Font is not loaded, cannot create texture from text."
            log.error(message)
            self.running = False
            raise RuntimeError(message)

        del size  # the engine font has a fixed size

        try:
            texture = self._font.render(text, False, TEXT_COLOR)
        except pygame.error as exc:
            log.warning(f"Failed to create surface from text: {exc}")
            return None

        self._loaded_textures.append(texture)
        log.info(f"Created texture from text: {text}")
        return texture

    def unload_texture(self, texture: Optional[pygame.Surface]) -> None:
        """Stop tracking a texture that was loaded by this engine."""
        if texture is None:
            return
        for index, loaded in enumerate(self._loaded_textures):
            if loaded is texture:
                del self._loaded_textures[index]
                break
        log.info("Unloaded texture!")