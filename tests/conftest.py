import os

# Headless SDL so Display/font tests run without a screen or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from pixel_perfect_camera.geometry import Rect2  # noqa: E402
from pixel_perfect_camera.metrics import ScalingMetrics  # noqa: E402


@pytest.fixture
def pygame_display():
    pygame.display.init()
    pygame.font.init()
    yield
    pygame.display.quit()


class FakeDisplay:
    """Display stand-in with settable geometry."""

    def __init__(self, viewport_size=(800, 600), window_size=(800, 600), display_rect=None):
        self.viewport_size = viewport_size
        self.window_size = window_size
        self._display_rect = display_rect or Rect2((0, 0), viewport_size)

    def display_rect(self):
        return self._display_rect

    def set_display_rect(self, rect):
        self._display_rect = rect


@pytest.fixture
def fake_display():
    return FakeDisplay()


@pytest.fixture
def identity_metrics():
    return ScalingMetrics.from_display((800, 600), (800, 600), Rect2((0, 0), (800, 600)))
