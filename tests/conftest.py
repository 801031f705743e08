import os

# headless pygame for the client tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pingpong_core.engine import PingPongEngine


@pytest.fixture
def engine():
    return PingPongEngine()


@pytest.fixture
def place():
    def _place(engine, x, y, dx, dy):
        engine.ball.pos.update(x, y)
        engine.ball.vel.update(dx, dy)
    return _place
