"""Scene and scene-object data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

FPS = 60

UpdateFn = Callable[[Any, Any], None]
HookFn = Callable[[Any], None]


@dataclass
class SceneObject:
    """A drawable item positioned on screen."""

    name: str = ""
    texture: Optional[Any] = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    rotation: float = 0.0
    visible: bool = True


@dataclass
class Scene:
    """A set of layered objects with lifecycle callbacks.

    Layers are rendered background first, then scene, then ui.
    """

    title: str = "Untitled Scene"
    update: Optional[UpdateFn] = None
    init: Optional[HookFn] = None
    destroy: Optional[HookFn] = None
    on_set_as_curr_scene: Optional[HookFn] = None
    background: list[SceneObject] = field(default_factory=list)
    scene: list[SceneObject] = field(default_factory=list)
    ui: list[SceneObject] = field(default_factory=list)
    loaded: bool = False