import logging

import pygame

from pingpong_core.constants import WIDTH, HEIGHT, WHITE, BLACK, GRAY, DARK, BLUE, GREEN
from pingpong_core.controls import InputMapper, Key
from pingpong_core.loop import FrameLoop
from pingpong_client.game_view import draw_frame
from pingpong_client.ui import Button, draw_lines

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}

HOW_TO_PLAY = [
    "Use ← → arrow keys to move the paddle",
    "Keep the ball bouncing to score points",
    "Ball changes direction based on where it hits the paddle",
    "Ball gradually slows down due to friction",
    "Game ends if ball hits bottom or stops moving",
]


class Screen:
    name = "base"
    def __init__(self, app): self.app = app
    def on_enter(self, **kwargs): pass
    def on_exit(self): pass
    def handle_event(self, event): pass
    def update(self, dt): pass
    def draw(self, surface): pass


# -------------------- Instructions --------------------
class InstructionsScreen(Screen):
    name = "instructions"
    def __init__(self, app):
        super().__init__(app)
        self.title_font = pygame.font.SysFont(None, 64)
        self.small_font = pygame.font.SysFont(None, 28)
        self.start_btn = Button((WIDTH//2 - 120, HEIGHT - 150, 240, 55), "Start", self.small_font, BLUE, WHITE)

    def handle_event(self, event):
        if self.start_btn.is_clicked(event):
            self.app.change_screen("game")
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.app.change_screen("game")

    def draw(self, surface):
        surface.fill(DARK)
        title = self.title_font.render("How to Play", True, WHITE)
        surface.blit(title, title.get_rect(center=(WIDTH//2, 110)))

        draw_lines(surface, self.small_font, [f"• {line}" for line in HOW_TO_PLAY], GRAY, (WIDTH//2 - 280, 190))
        self.start_btn.draw(surface)


# -------------------- Game --------------------
class GameScreen(Screen):
    name = "game"
    def __init__(self, app):
        super().__init__(app)
        self.big_font = pygame.font.SysFont(None, 64)
        self.small_font = pygame.font.SysFont(None, 32)

        self.engine = app.engine
        self.controls = InputMapper(self.engine)
        self.loop = FrameLoop(self.engine, self._on_frame)
        self.snap = self.engine.snapshot()

        self.play_again_btn = Button((WIDTH//2 - 110, HEIGHT//2 + 40, 220, 50), "Play Again", self.small_font, GREEN, BLACK)
        self.play_again_btn.visible = False

    def on_enter(self, **kwargs):
        self.snap = self.engine.snapshot()
        self.loop.start()

    def on_exit(self):
        self.loop.stop()

    def restart(self):
        self.engine.reset()
        self.snap = self.engine.snapshot()
        self.play_again_btn.visible = False

    def _on_frame(self, snap):
        self.snap = snap
        if snap.is_over and not self.play_again_btn.visible:
            self.play_again_btn.visible = True
            logger.debug("showing end overlay: %s", snap.end_message)

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            key = KEYMAP.get(event.key)
            if key is not None:
                self.controls.press(key)
            elif self.snap.is_over and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r):
                self.restart()
        elif event.type == pygame.KEYUP:
            key = KEYMAP.get(event.key)
            if key is not None:
                self.controls.release(key)

        if self.play_again_btn.is_clicked(event):
            self.restart()

    def update(self, dt):
        if self.loop.running:
            self.loop.step(dt)

    def draw(self, surface):
        draw_frame(surface, self.big_font, self.small_font, self.snap)
        self.play_again_btn.draw(surface)
