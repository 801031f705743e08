# pingpong_client/main.py
import logging
import os
import sys

import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pingpong_core.constants import APP_TITLE, WIDTH, HEIGHT, FPS
from pingpong_core.engine import PingPongEngine
from pingpong_client.screens import InstructionsScreen, GameScreen

logger = logging.getLogger(__name__)


class App:
    def __init__(self, fps: int = FPS):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.engine = PingPongEngine()

        self.screens = {
            "instructions": InstructionsScreen(self),
            "game": GameScreen(self),
        }

        self.current = None
        self.running = True
        self.change_screen("instructions")

    def change_screen(self, name, **kwargs):
        if self.current:
            self.current.on_exit()
        self.current = self.screens[name]
        logger.debug("screen -> %s", name)
        self.current.on_enter(**kwargs)

    def handle_global_keys(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def run(self):
        try:
            while self.running:
                dt = self.clock.tick(self.fps) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    self.handle_global_keys(event)
                    self.current.handle_event(event)

                self.current.update(dt)
                self.current.draw(self.screen)
                pygame.display.flip()

        finally:
            if self.current:
                self.current.on_exit()
            pygame.quit()


def main():
    # Run with a different frame rate / verbosity as:
    #   PINGPONG_FPS=120 PINGPONG_LOG_LEVEL=DEBUG pingpong
    level = os.getenv("PINGPONG_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    fps = int(os.getenv("PINGPONG_FPS", str(FPS)))
    App(fps=fps).run()


if __name__ == "__main__":
    main()
