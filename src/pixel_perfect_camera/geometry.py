"""2D value types: pygame's Vector2, a real-valued Rect2, and pixel rounding."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

Vector2 = pygame.math.Vector2


def round_vector(v) -> Vector2:
    """Round each component to the nearest integer.

    Uses Python's built-in round(), which breaks ties to even:
    0.5 -> 0, 1.5 -> 2, -0.5 -> 0, -1.5 -> -2.
    """
    v = Vector2(v)
    return Vector2(round(v.x), round(v.y))


@dataclass
class Rect2:
    """Axis-aligned rectangle with float origin and size.

    pygame.Rect only holds integers, which is too coarse for visible-area math.
    """
    origin: Vector2
    size: Vector2

    def __post_init__(self):
        self.origin = Vector2(self.origin)
        self.size = Vector2(self.size)

    @property
    def center(self) -> Vector2:
        return self.origin + self.size / 2

    @property
    def end(self) -> Vector2:
        return self.origin + self.size

    def has_area(self) -> bool:
        return self.size.x > 0 and self.size.y > 0

    def to_pygame(self) -> pygame.Rect:
        """Truncate to an integer pygame.Rect (for blitting)."""
        return pygame.Rect(int(self.origin.x), int(self.origin.y), int(self.size.x), int(self.size.y))
