import pygame

from pixel_perfect_camera.geometry import Rect2, Vector2


class Camera:
    """Follow camera whose render position is its own position plus an offset.

    position is authoritative and belongs to follow/smoothing. offset is a
    per-tick correction layered on top; nothing here ever folds it back in.
    """

    def __init__(self, viewport_width, viewport_height, zoom=1.0, smoothing_speed=0.0):
        self.viewport_size = Vector2(viewport_width, viewport_height)
        self.position = Vector2(0, 0)
        self.zoom = Vector2(zoom, zoom)
        self.offset = Vector2(0, 0)
        self.smoothing_speed = smoothing_speed
        self.limits: Vector2 | None = None  # map size in px, None = unbounded
        self.enabled = True
        self.pixel_perfect_enabled = True

    @property
    def global_position(self) -> Vector2:
        return Vector2(self.position)

    @property
    def render_position(self) -> Vector2:
        return self.position + self.offset

    @property
    def visible_world_size(self) -> Vector2:
        return self.viewport_size.elementwise() / self.zoom

    # ------------------------------------------------------------------
    # Follow
    # ------------------------------------------------------------------

    def set_limits(self, map_width_px, map_height_px):
        self.limits = Vector2(map_width_px, map_height_px)

    def follow(self, target, dt):
        """Move toward *target*, clamped so we never show void beyond the map."""
        target = Vector2(target)
        if self.smoothing_speed > 0:
            weight = min(1.0, self.smoothing_speed * dt)
            self.position += (target - self.position) * weight
        else:
            self.position = target
        self._clamp()

    def snap_to(self, target):
        self.position = Vector2(target)
        self._clamp()

    def _clamp(self):
        if self.limits is None:
            return
        half = self.visible_world_size / 2
        for axis in (0, 1):
            lo = half[axis]
            hi = self.limits[axis] - half[axis]
            if hi < lo:
                # Map smaller than the view: keep it centered
                self.position[axis] = self.limits[axis] / 2
            else:
                self.position[axis] = max(lo, min(self.position[axis], hi))

    # ------------------------------------------------------------------
    # Flags and correction
    # ------------------------------------------------------------------

    def apply_correction(self, correction):
        """Replace the additive render offset. Never touches position."""
        self.offset = Vector2(correction)

    def clear_correction(self):
        self.offset = Vector2(0, 0)

    def set_pixel_perfect(self, enabled):
        # Clear first so a stale offset can't stay stuck once snapping stops
        if not enabled:
            self.clear_correction()
        self.pixel_perfect_enabled = enabled

    def set_enabled(self, enabled):
        if not enabled:
            self.clear_correction()
        self.enabled = enabled

    def set_zoom(self, zoom):
        self.zoom = Vector2(zoom, zoom)
        self._clamp()

    # ------------------------------------------------------------------
    # World -> canvas
    # ------------------------------------------------------------------

    def view_rect(self) -> Rect2:
        """World-space area currently on screen."""
        size = self.visible_world_size
        return Rect2(self.render_position - size / 2, size)

    def world_to_screen(self, point) -> Vector2:
        top_left = self.view_rect().origin
        return (Vector2(point) - top_left).elementwise() * self.zoom

    def apply(self, rect):
        """Offset a world-space rect into canvas-space."""
        top_left = self.world_to_screen((rect.x, rect.y))
        bottom_right = self.world_to_screen((rect.right, rect.bottom))
        x, y = round(top_left.x), round(top_left.y)
        return pygame.Rect(x, y, round(bottom_right.x) - x, round(bottom_right.y) - y)
