import math

import pygame
from pixel_perfect_camera.settings import (
    TILE_SIZE, COLOR_TILE_LIGHT, COLOR_TILE_DARK, COLOR_TILE_BORDER, COLOR_MARKER,
)

LIGHT = 0
DARK = 1
MARKER = 2

TILE_COLORS = {
    LIGHT: COLOR_TILE_LIGHT,
    DARK: COLOR_TILE_DARK,
    MARKER: COLOR_MARKER,
}


def checker_grid(width_tiles, height_tiles, marker_every=8):
    """Checkerboard with a marker tile every *marker_every* tiles.

    Hard 1px tile edges make sub-pixel shimmer easy to spot.
    """
    grid = []
    for row in range(height_tiles):
        line = []
        for col in range(width_tiles):
            if marker_every and row % marker_every == 0 and col % marker_every == 0:
                line.append(MARKER)
            else:
                line.append(LIGHT if (row + col) % 2 == 0 else DARK)
        grid.append(line)
    return grid


class TileMap:
    def __init__(self, grid=None, width_tiles=64, height_tiles=48):
        self.grid = grid if grid is not None else checker_grid(width_tiles, height_tiles)
        self.height_tiles = len(self.grid)
        self.width_tiles = len(self.grid[0])
        self.width_px = self.width_tiles * TILE_SIZE
        self.height_px = self.height_tiles * TILE_SIZE

    def visible_range(self, camera):
        """(start_col, end_col, start_row, end_row) of tiles the camera can see."""
        view = camera.view_rect()
        start_col = max(0, math.floor(view.origin.x / TILE_SIZE))
        end_col = min(self.width_tiles, math.floor(view.end.x / TILE_SIZE) + 1)
        start_row = max(0, math.floor(view.origin.y / TILE_SIZE))
        end_row = min(self.height_tiles, math.floor(view.end.y / TILE_SIZE) + 1)
        return start_col, end_col, start_row, end_row

    def draw(self, screen, camera):
        # Viewport culling: only draw tiles visible on screen
        start_col, end_col, start_row, end_row = self.visible_range(camera)

        for row_idx in range(start_row, end_row):
            for col_idx in range(start_col, end_col):
                tile = self.grid[row_idx][col_idx]
                world_rect = pygame.Rect(
                    col_idx * TILE_SIZE, row_idx * TILE_SIZE, TILE_SIZE, TILE_SIZE
                )
                screen_rect = camera.apply(world_rect)
                pygame.draw.rect(screen, TILE_COLORS.get(tile, COLOR_TILE_LIGHT), screen_rect)
                pygame.draw.rect(screen, COLOR_TILE_BORDER, screen_rect, 1)
