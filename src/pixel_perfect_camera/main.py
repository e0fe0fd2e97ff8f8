import logging

import pygame
from pixel_perfect_camera.settings import (
    VIEWPORT_WIDTH, VIEWPORT_HEIGHT, FPS, PHYSICS_HZ, COLOR_BLACK,
    MIN_ZOOM, MAX_ZOOM, ZOOM_STEP,
)
from pixel_perfect_camera.camera import Camera
from pixel_perfect_camera.config import load_config, save_config
from pixel_perfect_camera.corrector import PixelSnapCorrector, Tick
from pixel_perfect_camera.display import Display
from pixel_perfect_camera.driver import FrameDriver
from pixel_perfect_camera.hud import draw_hud
from pixel_perfect_camera.metrics import StretchMode
from pixel_perfect_camera.target import Wanderer
from pixel_perfect_camera.tilemap import TileMap

logger = logging.getLogger(__name__)

_ZOOM_IN_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
_ZOOM_OUT_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


class Game:
    def __init__(self, config=None):
        self.config = config if config is not None else load_config()
        self.display = Display(
            (VIEWPORT_WIDTH, VIEWPORT_HEIGHT),
            (self.config["window_width"], self.config["window_height"]),
            StretchMode.parse(self.config["stretch_mode"]),
        )
        pygame.display.set_caption("Pixel Perfect Camera")
        self.clock = pygame.time.Clock()
        self.running = True
        self.show_hud = self.config["show_hud"]

        self.tilemap = TileMap()
        self.target = Wanderer((self.tilemap.width_px / 2, self.tilemap.height_px / 2))

        self.camera = Camera(
            VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
            zoom=self.config["zoom"],
            smoothing_speed=self.config["smoothing_speed"],
        )
        self.camera.set_limits(self.tilemap.width_px, self.tilemap.height_px)
        self.camera.snap_to(self.target.position)
        self.camera.set_pixel_perfect(self.config["pixel_perfect"])

        # Target motion, camera follow and correction share one tick
        use_physics_tick = self.config["use_physics_tick"]
        self.follow_tick = Tick.select(use_physics_tick)
        self.corrector = PixelSnapCorrector(self.display, use_physics_tick=use_physics_tick)
        self.corrector.refresh_metrics()

        self.driver = FrameDriver(self.tick, self.tick, physics_hz=PHYSICS_HZ)
        self.last_correction = None

    def tick(self, tick, dt):
        if tick is self.follow_tick:
            self.target.update(dt)
            self.camera.follow(self.target.position, dt)
        correction = self.corrector.on_tick(tick, self.camera)
        if correction is not None:
            self.last_correction = correction

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.VIDEORESIZE:
                self.display.resize(event.size)
                self.corrector.refresh_metrics()
            elif event.type == pygame.WINDOWSIZECHANGED:
                self.display.sync_window()
                self.corrector.refresh_metrics()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_p:
            self.camera.set_pixel_perfect(not self.camera.pixel_perfect_enabled)
            self.config["pixel_perfect"] = self.camera.pixel_perfect_enabled
            save_config(self.config)
            logger.info("Pixel perfect %s", "on" if self.camera.pixel_perfect_enabled else "off")
        elif key == pygame.K_F11:
            self.display.toggle_fullscreen()
            self.corrector.refresh_metrics()
        elif key == pygame.K_F3:
            self.show_hud = not self.show_hud
        elif key in _ZOOM_IN_KEYS:
            self._change_zoom(ZOOM_STEP)
        elif key in _ZOOM_OUT_KEYS:
            self._change_zoom(-ZOOM_STEP)

    def _change_zoom(self, delta):
        zoom = max(MIN_ZOOM, min(MAX_ZOOM, self.camera.zoom.x + delta))
        self.camera.set_zoom(zoom)
        self.config["zoom"] = zoom
        save_config(self.config)

    def draw(self):
        canvas = self.display.canvas
        canvas.fill(COLOR_BLACK)
        self.tilemap.draw(canvas, self.camera)
        self.target.draw(canvas, self.camera)

        self.display.present()
        if self.show_hud:
            draw_hud(self.display.window, self.camera, self.corrector, self.last_correction)
        self.display.flip()

    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()
            self.driver.advance(dt)
            self.draw()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
    )
    pygame.init()
    game = Game()
    game.run()
    pygame.quit()


if __name__ == "__main__":
    main()
