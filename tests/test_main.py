import pygame
import pytest

from pixel_perfect_camera import config
from pixel_perfect_camera.corrector import Tick
from pixel_perfect_camera.main import Game
from pixel_perfect_camera.settings import PHYSICS_HZ


@pytest.fixture
def game(pygame_display, tmp_path, monkeypatch):
    monkeypatch.setattr(config, "_config_dir_cache", str(tmp_path))
    return Game(config=dict(config.DEFAULT_CONFIG))


def _is_whole(v):
    return all(c == pytest.approx(round(c), abs=1e-9) for c in v)


def test_simulation_ticks_snap_render_position(game):
    game.driver.advance(3 / PHYSICS_HZ)
    assert game.driver.simulation_ticks >= 2
    assert game.last_correction is not None
    assert _is_whole(game.camera.render_position)


def test_target_and_correction_share_tick(game):
    assert game.follow_tick is Tick.SIMULATION
    before = game.target.time
    game.tick(Tick.PRESENTATION, 0.5)
    assert game.target.time == before
    game.tick(Tick.SIMULATION, 0.5)
    assert game.target.time == before + 0.5


def test_presentation_tick_mode(pygame_display, tmp_path, monkeypatch):
    monkeypatch.setattr(config, "_config_dir_cache", str(tmp_path))
    game = Game(config=dict(config.DEFAULT_CONFIG, use_physics_tick=False))
    assert game.follow_tick is Tick.PRESENTATION
    assert game.corrector.tick is Tick.PRESENTATION
    game.tick(Tick.PRESENTATION, 0.25)
    assert _is_whole(game.camera.render_position)


def test_toggle_pixel_perfect_clears_and_saves(game, tmp_path):
    game.driver.advance(1 / PHYSICS_HZ)
    game.handle_key(pygame.K_p)
    assert not game.camera.pixel_perfect_enabled
    assert tuple(game.camera.offset) == (0, 0)
    assert config.load_config()["pixel_perfect"] is False


def test_zoom_keys_clamp(game):
    for _ in range(20):
        game.handle_key(pygame.K_EQUALS)
    assert game.camera.zoom.x == 4.0
    for _ in range(20):
        game.handle_key(pygame.K_MINUS)
    assert game.camera.zoom.x == 0.5


def test_resize_event_refreshes_metrics(game):
    pygame.event.post(pygame.event.Event(pygame.VIDEORESIZE, size=(1000, 600), w=1000, h=600))
    game.handle_events()
    assert tuple(game.corrector.metrics.window_size) == (1000, 600)


def test_draw_smoke(game):
    game.driver.advance(1 / PHYSICS_HZ)
    game.draw()
    game.show_hud = False
    game.draw()


def test_zoom_change_is_saved(game):
    game.handle_key(pygame.K_EQUALS)
    assert game.camera.zoom.x == 1.5
    assert config.load_config()["zoom"] == 1.5


def test_resize_event_while_fullscreen_keeps_mode(game):
    game.handle_key(pygame.K_F11)
    pygame.event.post(pygame.event.Event(pygame.VIDEORESIZE, size=(640, 360), w=640, h=360))
    game.handle_events()
    assert game.display.fullscreen
    assert game.display.window.get_flags() & pygame.FULLSCREEN
    assert tuple(game.corrector.metrics.window_size) == tuple(game.display.window_size)
