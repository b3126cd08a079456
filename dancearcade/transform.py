"""Screen-space positioning helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """An integer 2D position."""

    x: int = 0
    y: int = 0


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def get_screen_center(
    screen_width: int, screen_height: int, tex_width: int, tex_height: int
) -> Vector2:
    """Top-left position that centres a texture of the given size on screen."""
    return Vector2(_half(screen_width - tex_width), _half(screen_height - tex_height))