"""Window + logical canvas. Scenes draw at viewport resolution; present() scales up."""

from __future__ import annotations

import logging

import pygame

from pixel_perfect_camera.geometry import Rect2, Vector2
from pixel_perfect_camera.metrics import StretchMode, letterbox_rect
from pixel_perfect_camera.settings import COLOR_BLACK

logger = logging.getLogger(__name__)


class Display:
    def __init__(self, viewport_size, window_size, stretch_mode: StretchMode = StretchMode.KEEP):
        self.stretch_mode = stretch_mode
        self.fullscreen = False
        self._windowed_size = (int(window_size[0]), int(window_size[1]))
        self.window = pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)
        self.canvas = pygame.Surface((int(viewport_size[0]), int(viewport_size[1])))

    @property
    def viewport_size(self) -> Vector2:
        return Vector2(self.canvas.get_size())

    @property
    def window_size(self) -> Vector2:
        return Vector2(self.window.get_size())

    def display_rect(self) -> Rect2:
        return letterbox_rect(self.viewport_size, self.window_size, self.stretch_mode)

    def resize(self, size):
        """Recreate the window surface after a VIDEORESIZE."""
        size = (max(1, int(size[0])), max(1, int(size[1])))
        if self.fullscreen:
            # set_mode here would silently drop fullscreen
            self.sync_window()
            return
        self._windowed_size = size
        self.window = pygame.display.set_mode(size, pygame.RESIZABLE)

    def sync_window(self):
        """Pick up a window size changed behind our back (WINDOWSIZECHANGED)."""
        surface = pygame.display.get_surface()
        if surface is not None:
            self.window = surface

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.window = pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)
        logger.info("Fullscreen %s, window now %s", "on" if self.fullscreen else "off",
                    self.window.get_size())

    def present(self):
        """Nearest-neighbour scale the canvas into the display rect."""
        self.window.fill(COLOR_BLACK)
        rect = self.display_rect().to_pygame()
        if rect.width > 0 and rect.height > 0:
            scaled = pygame.transform.scale(self.canvas, rect.size)
            self.window.blit(scaled, rect.topleft)

    def flip(self):
        pygame.display.flip()
