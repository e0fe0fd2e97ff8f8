"""Viewport/window scaling metrics and letterbox placement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from pixel_perfect_camera.geometry import Rect2, Vector2


class StretchMode(Enum):
    KEEP = "keep"                  # fit, keep aspect, center (letterbox/pillarbox)
    KEEP_INTEGER = "keep_integer"  # like KEEP, whole-number scale only
    STRETCH = "stretch"            # fill the window, ignore aspect

    @classmethod
    def parse(cls, name: str) -> StretchMode:
        """Look up a mode by its config name. Raises ValueError if unknown."""
        return cls(str(name).strip().lower())


def letterbox_rect(viewport_size, window_size, mode: StretchMode = StretchMode.KEEP) -> Rect2:
    """Return the window-space rect the logical canvas is scaled into.

    Origins are whole window pixels; any odd leftover pixel goes to the
    right/bottom bar.
    """
    vw, vh = viewport_size
    ww, wh = int(window_size[0]), int(window_size[1])
    if vw <= 0 or vh <= 0 or ww <= 0 or wh <= 0:
        return Rect2((0, 0), (0, 0))

    if mode is StretchMode.STRETCH:
        return Rect2((0, 0), (ww, wh))

    scale = min(ww / vw, wh / vh)
    if mode is StretchMode.KEEP_INTEGER and scale >= 1:
        scale = math.floor(scale)

    w = int(vw * scale)
    h = int(vh * scale)
    return Rect2(((ww - w) // 2, (wh - h) // 2), (w, h))


@dataclass
class ScalingMetrics:
    """Cached geometry the corrector needs for centering.

    visible_rect is in logical-viewport pixels: the part of viewport space the
    whole window shows once the display rect's scale and origin are undone.
    """
    viewport_size: Vector2
    visible_rect: Rect2
    window_size: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=lambda: Vector2(1, 1))

    def __post_init__(self):
        self.viewport_size = Vector2(self.viewport_size)
        self.window_size = Vector2(self.window_size)
        self.scale = Vector2(self.scale)

    @property
    def valid(self) -> bool:
        return self.viewport_size.x > 0 and self.viewport_size.y > 0

    @classmethod
    def from_display(cls, viewport_size, window_size, display_rect: Rect2) -> ScalingMetrics:
        """Map the window back into viewport space through the display rect."""
        viewport_size = Vector2(viewport_size)
        window_size = Vector2(window_size)

        if viewport_size.x <= 0 or viewport_size.y <= 0:
            return cls(viewport_size, Rect2((0, 0), (0, 0)), window_size, Vector2(0, 0))

        if not display_rect.has_area():
            # Minimized or not yet mapped: nothing to center against
            return cls(viewport_size, Rect2((0, 0), viewport_size), window_size, Vector2(1, 1))

        scale = display_rect.size.elementwise() / viewport_size
        origin = (-display_rect.origin).elementwise() / scale
        size = window_size.elementwise() / scale
        return cls(viewport_size, Rect2(origin, size), window_size, scale)
