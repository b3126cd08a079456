"""Game-level data: arrows, songs and the game state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pygame

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Dance Arcade"

ARROW_SIZE = 50
ARROW_SPEED = 200
ARROW_COLOR = (255, 0, 0, 255)


class ArrowType(enum.IntEnum):
    """The pads a player can step on."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    STOMP = 2
    BOTTOM_LEFT = 3
    BOTTOM_RIGHT = 4


class Arrow:
    """A falling arrow drawn as a red square."""

    def __init__(self, x: int, start_y: float) -> None:
        self.y = float(start_y)
        self.rect = pygame.Rect(x, int(start_y), ARROW_SIZE, ARROW_SIZE)

    def update(self, delta: float) -> None:
        """Move the arrow down by the elapsed time in seconds."""
        self.y += ARROW_SPEED * delta
        self.rect.y = int(self.y)

    def draw(self, surface: pygame.Surface) -> None:
        """Fill the arrow's rectangle on the given surface."""
        surface.fill(ARROW_COLOR, self.rect)


@dataclass
class Song:
    """A playable song and its metadata."""

    name: str = "No Name"
    description: str = "No Description"
    path: Path = field(default_factory=lambda: Path(""))
    background: Optional[Any] = None
    length: int = -1


@dataclass
class Game:
    """Song selection and playback state."""

    scroll_speed: float = 0.0
    songs: list[Song] = field(default_factory=list)
    curr_song_index: int = -1
    curr_song: Optional[Song] = None