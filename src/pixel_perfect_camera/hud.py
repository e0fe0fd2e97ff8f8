"""Debug overlay drawn on the window (not the canvas) so text stays sharp."""

from __future__ import annotations

import pygame

from pixel_perfect_camera.settings import COLOR_HUD_BG, COLOR_HUD_DIM, COLOR_HUD_TEXT

_cache: dict[int, pygame.font.Font] = {}


def get_font(size: int) -> pygame.font.Font:
    if size not in _cache:
        _cache[size] = pygame.font.SysFont(None, size)
    return _cache[size]


def _fmt(v) -> str:
    return f"({v[0]:+.3f}, {v[1]:+.3f})"


def hud_lines(camera, corrector, last_correction) -> list[str]:
    """Text rows for the overlay."""
    metrics = corrector.metrics
    lines = [
        f"pixel perfect: {'on' if camera.pixel_perfect_enabled else 'off'}   [P]",
        f"tick: {corrector.tick.name.lower()}",
        f"zoom: {camera.zoom.x:g}   [+/-]",
        f"position: {_fmt(camera.global_position)}",
        f"offset: {_fmt(camera.offset)}",
    ]
    if last_correction is not None:
        lines.append(f"last correction: {_fmt(last_correction)}")
    if metrics is None:
        lines.append("metrics: not refreshed")
    else:
        vis = metrics.visible_rect
        lines.append(
            f"viewport {int(metrics.viewport_size.x)}x{int(metrics.viewport_size.y)}"
            f"  window {int(metrics.window_size.x)}x{int(metrics.window_size.y)}"
            f"  scale {metrics.scale.x:.2f}"
        )
        lines.append(f"visible: origin {_fmt(vis.origin)} size {_fmt(vis.size)}")
    return lines


def draw_hud(screen, camera, corrector, last_correction=None):
    font = get_font(22)
    lines = hud_lines(camera, corrector, last_correction)
    line_h = font.get_linesize()

    width = max(font.size(line)[0] for line in lines) + 16
    panel = pygame.Surface((width, line_h * len(lines) + 12), pygame.SRCALPHA)
    panel.fill(COLOR_HUD_BG)
    screen.blit(panel, (8, 8))

    for i, line in enumerate(lines):
        color = COLOR_HUD_TEXT if i < 2 else COLOR_HUD_DIM
        surf = font.render(line, True, color)
        screen.blit(surf, (16, 14 + i * line_h))
