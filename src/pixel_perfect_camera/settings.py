"""Global constants for the pixel-perfect camera demo."""

# Logical render resolution (the canvas every scene draws into)
VIEWPORT_WIDTH = 320
VIEWPORT_HEIGHT = 180

# Default physical window size
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

FPS = 144
PHYSICS_HZ = 60
MAX_PHYSICS_STEPS = 5

TILE_SIZE = 16

# Follow behaviour
SMOOTHING_SPEED = 5.0
MIN_ZOOM = 0.5
MAX_ZOOM = 4.0
ZOOM_STEP = 0.5

# Feature flags
PIXEL_PERFECT_ENABLED = True
USE_PHYSICS_TICK = True

COLOR_BLACK = (0, 0, 0)
COLOR_TILE_LIGHT = (92, 120, 84)
COLOR_TILE_DARK = (72, 98, 66)
COLOR_TILE_BORDER = (48, 64, 46)
COLOR_MARKER = (210, 180, 90)
COLOR_TARGET = (235, 90, 70)
COLOR_TARGET_OUTLINE = (30, 20, 20)
COLOR_HUD_TEXT = (230, 230, 230)
COLOR_HUD_DIM = (140, 140, 140)
COLOR_HUD_BG = (10, 10, 20, 180)
