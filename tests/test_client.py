import pygame
import pytest

from pingpong_core.constants import WIDTH, HEIGHT
from pingpong_core.engine import PingPongEngine
from pingpong_client.game_view import draw_frame
from pingpong_client.screens import GameScreen, InstructionsScreen
from pingpong_client.ui import Button


class FakeApp:
    def __init__(self):
        self.engine = PingPongEngine()
        self.changes = []

    def change_screen(self, name, **kwargs):
        self.changes.append(name)


@pytest.fixture(scope="module", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def app():
    return FakeApp()


def key(kind, k):
    return pygame.event.Event(kind, key=k, mod=0, unicode="", scancode=0)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_hidden_button_ignores_clicks():
    font = pygame.font.SysFont(None, 24)
    btn = Button((10, 10, 100, 40), "Play Again", font, (0, 0, 0), (255, 255, 255))
    assert btn.is_clicked(click((20, 20)))
    btn.visible = False
    assert not btn.is_clicked(click((20, 20)))


def test_instructions_start_button(app):
    screen = InstructionsScreen(app)
    screen.handle_event(click(screen.start_btn.rect.center))
    assert app.changes == ["game"]


def test_arrow_keys_drive_paddle(app):
    screen = GameScreen(app)
    screen.on_enter()
    screen.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    screen.update(1 / 60)
    assert app.engine.paddle.x == 342
    screen.handle_event(key(pygame.KEYUP, pygame.K_RIGHT))
    assert app.engine.paddle.dx == 0


def test_play_again_after_round_ends(app):
    screen = GameScreen(app)
    screen.on_enter()
    for _ in range(500):
        screen.update(1 / 60)
    assert screen.snap.is_over
    assert screen.play_again_btn.visible

    screen.handle_event(click(screen.play_again_btn.rect.center))
    assert not app.engine.is_over
    assert app.engine.score == 0
    assert not screen.play_again_btn.visible


@pytest.mark.parametrize("restart_key", [pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r])
def test_restart_keys_after_round_ends(app, restart_key):
    screen = GameScreen(app)
    screen.on_enter()
    screen.handle_event(key(pygame.KEYDOWN, restart_key))
    screen.update(1 / 60)
    assert app.engine.ball.pos.y > 300

    for _ in range(500):
        screen.update(1 / 60)
    assert screen.snap.is_over

    screen.handle_event(key(pygame.KEYDOWN, restart_key))
    assert not app.engine.is_over
    assert app.engine.ball.pos.y == 300
    assert not screen.play_again_btn.visible


def test_update_does_nothing_after_exit(app):
    screen = GameScreen(app)
    screen.on_enter()
    screen.on_exit()
    before = app.engine.state_hash()
    screen.update(1 / 60)
    assert app.engine.state_hash() == before


def test_draw_frame_smoke(app):
    surf = pygame.Surface((WIDTH, HEIGHT))
    fonts = pygame.font.SysFont(None, 64), pygame.font.SysFont(None, 32)
    draw_frame(surf, *fonts, app.engine.snapshot())
    assert surf.get_at((400, 300))[:3] == (255, 255, 255)

    app.engine.paddle.x = 0
    app.engine.ball.pos.update(700, 590)
    app.engine.tick()
    draw_frame(surf, *fonts, app.engine.snapshot())
    # overlay darkens the background
    assert surf.get_at((5, 300))[:3] == (0, 0, 0)
