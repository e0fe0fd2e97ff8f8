"""The followed object for the demo: a marker drifting at sub-pixel speeds."""
from __future__ import annotations

import math

import pygame

from pixel_perfect_camera.geometry import Vector2
from pixel_perfect_camera.settings import COLOR_TARGET, COLOR_TARGET_OUTLINE


class Wanderer:
    """Traces a Lissajous curve around *center*.

    Its speed is rarely a whole number of pixels per tick, so without snapping
    the camera lands between pixels almost every frame.
    """

    def __init__(self, center, radius=(120.0, 70.0), period: float = 14.0, size: int = 8):
        self.center = Vector2(center)
        self.radius = Vector2(radius)
        self.period = period
        self.size = size
        self.time = 0.0
        self.position = self._at(0.0)

    def _at(self, t: float) -> Vector2:
        phase = 2 * math.pi * t / self.period
        return self.center + Vector2(
            math.sin(phase) * self.radius.x,
            math.sin(2 * phase) * self.radius.y,
        )

    def update(self, dt: float):
        self.time += dt
        self.position = self._at(self.time)

    def draw(self, screen, camera):
        half = self.size // 2
        world_rect = pygame.Rect(0, 0, self.size, self.size)
        # Integer world rect anchored on the rounded position; camera handles the rest
        world_rect.topleft = (round(self.position.x) - half, round(self.position.y) - half)
        screen_rect = camera.apply(world_rect)
        pygame.draw.rect(screen, COLOR_TARGET, screen_rect)
        pygame.draw.rect(screen, COLOR_TARGET_OUTLINE, screen_rect, 1)
