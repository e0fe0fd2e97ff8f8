"""Pixel-snap and viewport-centering correction for a 2D camera.

The corrector never moves the camera. It produces an additive offset that the
camera layers over its own position when rendering, so follow/smoothing code
can keep owning that position.

Run it on the same tick that moves the followed target. A target moved in the
simulation step but corrected in the presentation step (or the reverse) lags
by one frame and visibly jitters.
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto

from pixel_perfect_camera.geometry import Vector2, round_vector
from pixel_perfect_camera.metrics import ScalingMetrics

logger = logging.getLogger(__name__)


class Tick(Enum):
    SIMULATION = auto()    # fixed-step physics update
    PRESENTATION = auto()  # once per rendered frame

    @classmethod
    def select(cls, use_physics_tick: bool) -> Tick:
        return cls.SIMULATION if use_physics_tick else cls.PRESENTATION


def compute_correction(position, zoom, metrics: ScalingMetrics | None) -> Vector2:
    """Return the offset that snaps *position* to a whole pixel and re-centers it.

    Degenerate input (no metrics, zero-size viewport, zero or non-finite zoom)
    yields a zero vector instead of dividing by zero.
    """
    if metrics is None or not metrics.valid:
        return Vector2(0, 0)
    zoom = Vector2(zoom)
    if not all(math.isfinite(c) and c != 0 for c in zoom):
        return Vector2(0, 0)

    position = Vector2(position)
    pixel_delta = round_vector(position) - position

    viewport_center = metrics.viewport_size / 2
    visible_center = metrics.visible_rect.origin + metrics.visible_rect.size / 2
    centering_offset = (visible_center - viewport_center).elementwise() / zoom

    return pixel_delta + centering_offset


class PixelSnapCorrector:
    """Caches scaling metrics and applies the correction on one selected tick.

    *display* is anything exposing viewport_size, window_size and
    display_rect(); see display.Display.
    """

    def __init__(self, display, use_physics_tick: bool = True):
        self.display = display
        self.tick = Tick.select(use_physics_tick)
        self._metrics: ScalingMetrics | None = None
        self._warned_missing_metrics = False

    @property
    def metrics(self) -> ScalingMetrics | None:
        return self._metrics

    def refresh_metrics(self) -> ScalingMetrics:
        """Re-read viewport and window geometry. Call on attach and after every resize."""
        metrics = ScalingMetrics.from_display(
            self.display.viewport_size,
            self.display.window_size,
            self.display.display_rect(),
        )
        self._metrics = metrics
        logger.info(
            "Viewport: %s, Window: %s, Scale: %s, Visible: %s",
            tuple(metrics.viewport_size), tuple(metrics.window_size),
            tuple(metrics.scale), (tuple(metrics.visible_rect.origin), tuple(metrics.visible_rect.size)),
        )
        if not metrics.valid:
            logger.warning("Viewport has zero size; pixel snapping disabled until next refresh")
        return metrics

    def on_tick(self, tick: Tick, camera) -> Vector2 | None:
        """Compute and hand the correction to *camera* if this is our tick.

        Returns the correction, or None when the tick or camera flags skip it.
        """
        if tick is not self.tick:
            return None
        if not (camera.enabled and camera.pixel_perfect_enabled):
            return None

        if self._metrics is None and not self._warned_missing_metrics:
            logger.warning("Correction requested before refresh_metrics(); using zero offset")
            self._warned_missing_metrics = True

        correction = compute_correction(camera.global_position, camera.zoom, self._metrics)
        camera.apply_correction(correction)
        return correction
